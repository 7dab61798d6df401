""" CSS value parser
https://www.w3.org/TR/css-syntax-3/#parse-comma-separated-list-of-component-values
"""

from __future__ import annotations
from cssmix.css.lexer import Lexer, CSSParseError

from cssmix.css.tokens import *

__all__ = ["FunctionBlock", "Component", "Parse", "Parser", "serialize"]

class FunctionBlock:
    name: str
    value: list[Component]
    def __init__(self, name: str, value: list | None = None) -> None:
        self.name = name
        self.value = value or []

    def __repr__(self) -> str:
        return f"FunctionBlock({self.name!r}, {self.value})"

    def __str__(self) -> str:
        return f"{self.name}({serialize(self.value)})"

Component = Token | FunctionBlock

Tokens = list[Token] | str | list[Component]

class Parse:
    @staticmethod
    def normalize(_input_: Tokens) -> list[Token] | list[Component]:
        if isinstance(_input_, list):
            return list(_input_)
        elif isinstance(_input_, str):
            return Lexer(_input_).process()
        raise TypeError(
            "Unexpected input to parse. Expected string, list of tokens, or list of component values."
        )

    @staticmethod
    def parse_component_value(source: Tokens) -> Component:
        """Parse exactly one component value surrounded by optional whitespace."""
        parser = Parser(source)
        parser.skip_whitespace()
        if isinstance(parser.peek(), EOF):
            raise CSSParseError("Expected component value")
        cv = parser.consume_component_value()
        parser.skip_whitespace()
        if isinstance(parser.peek(), EOF):
            return cv
        raise CSSParseError("Expected only a component value but received more tokens")

    @staticmethod
    def parse_component_values(_input_: Tokens) -> list[Component]:
        parser = Parser(_input_)
        result = []
        while not isinstance(val := parser.consume_component_value(), EOF):
            result.append(val)
        return result

    @staticmethod
    def parse_comma_separated(_input_: Tokens) -> list[list[Component]]:
        """Split on top level commas. Commas inside of functions are left alone and
        leading/trailing whitespace of each entry is dropped. Empty entries, as in `a,,b`,
        are kept as empty lists.
        """
        parser = Parser(_input_)
        if all(isinstance(v, Whitespace) for v in parser.tokens):
            return []

        result = []
        current = []
        while True:
            next = parser.consume_component_value()
            if isinstance(next, (EOF, Comma)):
                result.append(strip(current))
                current = []
                if isinstance(next, EOF):
                    break
            else:
                current.append(next)
        return result


class Parser:
    def __init__(self, tokens: Tokens) -> None:
        self.tokens: list[Token] | list[Component] = Parse.normalize(tokens)

    def peek(self, amount: int = 1) -> Component:
        if len(self.tokens) >= amount:
            return self.tokens[amount - 1]
        return EOF()

    def next(self) -> Component:
        if len(self.tokens) >= 1:
            return self.tokens.pop(0)
        return EOF()

    def skip_whitespace(self):
        while isinstance(self.peek(), Whitespace):
            self.next()

    def consume_function(self, function: Function) -> FunctionBlock:
        fblock = FunctionBlock(function.raw)
        while True:
            next = self.next()
            if isinstance(next, RParantheses):
                return fblock
            elif isinstance(next, EOF):
                raise CSSParseError(f"Function {function.raw}( was not closed")
            else:
                self.tokens.insert(0, next)
                fblock.value.append(self.consume_component_value())

    def consume_component_value(self) -> Component:
        next = self.next()
        if isinstance(next, Function):
            return self.consume_function(next)
        return next


def strip(values: list[Component]) -> list[Component]:
    start, end = 0, len(values)
    while start < end and isinstance(values[start], Whitespace):
        start += 1
    while end > start and isinstance(values[end - 1], Whitespace):
        end -= 1
    return values[start:end]

def serialize(values: list[Component]) -> str:
    """Join component values back into css text, collapsing whitespace runs to a single space."""
    result = ""
    for value in values:
        if isinstance(value, Whitespace):
            if not result.endswith(" "):
                result += " "
        elif isinstance(value, Comma):
            result = result.rstrip() + ", "
        else:
            result += str(value)
    return result.strip()
