from __future__ import annotations

from collections.abc import Iterable, Iterator
from os import PathLike
from sys import stdout
from typing import TextIO

from cssmix.style import AtRule, Declaration, Node, Rule

__all__ = ["Stylesheet", "flatten", "render", "CONDITIONAL_AT_RULES"]

# At-rules whose block applies to the selector they are nested under
CONDITIONAL_AT_RULES = ("media", "supports", "container", "document")

def _write(content: str, stream: TextIO | None = None):
    stream = stream or stdout
    stream.write(content)
    stream.flush()


def _split(selector: str) -> list[str]:
    """Split a selector list on top level commas, leaving `:is(a, b)` and `[x="a,b"]` intact."""
    parts: list[str] = []
    depth, quote, start = 0, None, 0
    chars = iter(enumerate(selector))
    for i, char in chars:
        if char == "\\":
            next(chars, None)
        elif quote is not None:
            if char == quote:
                quote = None
        elif char in "\"'":
            quote = char
        elif char in "([":
            depth += 1
        elif char in ")]":
            depth = max(depth - 1, 0)
        elif char == "," and depth == 0:
            parts.append(selector[start:i].strip())
            start = i + 1
    parts.append(selector[start:].strip())
    return parts


def _resolve(parent: str | None, selector: str) -> str:
    """Combine a nested selector with its parent, replacing `&` like Sass does."""
    if parent is None:
        if "&" in selector:
            raise ValueError(f"Selector {selector!r} references a parent but is not nested")
        return selector.strip()

    combined = []
    for p in _split(parent):
        for s in _split(selector):
            combined.append(s.replace("&", p) if "&" in s else f"{p} {s}")
    return ", ".join(combined)


def flatten(parent: str | None, nodes: Iterable[Node]) -> list[Rule | AtRule]:
    """Flatten nested rules into css that has no nesting outside of at-rules.

    Declarations of a level are collected into a single rule placed before any nested
    output. Conditional at-rules (`@media`, `@supports`) keep applying to `parent`, every
    other at-rule block is emitted as is with its own rules left un-prefixed.
    """
    decls: list[Node] = []
    result: list[Rule | AtRule] = []
    for node in nodes:
        if isinstance(node, Declaration):
            if parent is None:
                raise ValueError(f"Declaration {node} is not inside of a rule")
            decls.append(node)
        elif isinstance(node, Rule):
            result.extend(flatten(_resolve(parent, node.selector), node.children))
        elif isinstance(node, AtRule):
            if node.children is None:
                result.append(AtRule(node.name, node.prelude))
            elif node.name in CONDITIONAL_AT_RULES:
                result.append(AtRule(node.name, node.prelude, list(flatten(parent, node.children))))
            else:
                result.append(AtRule(node.name, node.prelude, _descriptors(node.children)))
        else:
            raise TypeError(f"Expected a css node, found {node!r}")

    if len(decls) > 0 and parent is not None:
        result.insert(0, Rule(parent, decls))
    return result


def _descriptors(nodes: Iterable[Node]) -> list[Node]:
    result: list[Node] = []
    for node in nodes:
        if isinstance(node, Declaration):
            result.append(node)
        else:
            result.extend(flatten(None, [node]))
    return result


def render(node: Node, indent: str = "  ", depth: int = 0) -> list[str]:
    """Render a flattened node into lines of css."""
    pad = indent * depth
    if isinstance(node, Declaration):
        return [f"{pad}{node}"]
    elif isinstance(node, Rule):
        return [
            f"{pad}{node.selector} {{",
            *(line for child in node.children for line in render(child, indent, depth + 1)),
            f"{pad}}}",
        ]
    elif node.children is None:
        return [f"{pad}{node.header};"]
    return [
        f"{pad}{node.header} {{",
        *(line for child in node.children for line in render(child, indent, depth + 1)),
        f"{pad}}}",
    ]


class Stylesheet:
    """Collection of top level rules that renders to css text.

    Args
        indent (int): Spaces per nesting level in the rendered output. Defaults to `2`
    """

    __slots__ = ("__RULES__", "_indent_")

    def __init__(self, indent: int = 2) -> None:
        self._indent_ = " " * indent
        self.__RULES__: list[Node] = []

    def rule(self, selector: str, *content: Node | Iterable[Node]) -> Stylesheet:
        """Add a rule. Content may be nodes or the lists of nodes the helpers return."""
        children: list[Node] = []
        for item in content:
            if isinstance(item, (Declaration, Rule, AtRule)):
                children.append(item)
            else:
                children.extend(item)
        self.__RULES__.append(Rule(selector, children))
        return self

    def add(self, *nodes: Node | Iterable[Node]) -> Stylesheet:
        """Add top level nodes such as `@keyframes` or `@import`."""
        for item in nodes:
            if isinstance(item, (Declaration, Rule, AtRule)):
                self.__RULES__.append(item)
            else:
                self.__RULES__.extend(item)
        return self

    def flat(self) -> list[Rule | AtRule]:
        return flatten(None, self.__RULES__)

    def render(self) -> str:
        """Returns
            The css text for every rule, blocks separated by a blank line.
        """
        blocks = ["\n".join(render(node, self._indent_)) for node in self.flat()]
        return "\n\n".join(blocks) + ("\n" if len(blocks) > 0 else "")

    def write(self, path: str | PathLike[str] | None = None, stream: TextIO | None = None):
        """Write the rendered css to `path`, or to `stream` (defaults to stdout)."""
        if path is not None:
            with open(path, "w", encoding="utf-8") as file:
                file.write(self.render())
            return
        _write(self.render(), stream)

    def __iter__(self) -> Iterator[Node]:
        yield from self.__RULES__

    def __len__(self) -> int:
        return len(self.__RULES__)

    def __repr__(self) -> str:
        sep = "\n  "
        return f"""Stylesheet(
  {sep.join(repr(rule) for rule in self.__RULES__)}
)"""

    def __str__(self) -> str:
        return self.render()
