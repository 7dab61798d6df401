"""Tokens for CSS component values.

Only the subset of https://www.w3.org/TR/css-syntax-3/#tokenization that shows
up in declaration values is modelled here:

<value>
    <ident/> | <function/> ... ) | <hash/> | <string/>
    <number/> | <percentage/> | <dimension/>
    <comma/> | <delim/> | <whitespace/>
</value>
"""
from __future__ import annotations
from typing import Literal

__all__ = [
    "Token",
    "Ident",
    "Function",
    "Hash",
    "String",

    "Delim",
    "Comma",

    "LParantheses",
    "RParantheses",

    "Number",
    "Percentage",
    "Dimension",

    "Whitespace",
    "EOF",

    "ANGLE_UNITS",
]

# Degrees per unit
ANGLE_UNITS: dict[str, float] = {
    "deg": 1.0,
    "grad": 360 / 400,
    "turn": 360.0,
    "rad": 180 / 3.141592653589793,
}

class Token:
    raw: str
    def __init__(self, raw: str = ''):
        self.raw = raw

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.raw!r})'

    def __str__(self) -> str:
        return self.raw

    def __eq__(self, __value: object) -> bool:
        if isinstance(__value, Token):
            return type(self) is type(__value) and self.raw == __value.raw
        return False

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.raw))

class Ident(Token): pass
class Function(Token):
    def __str__(self) -> str:
        return f"{self.raw}("
class Hash(Token):
    def __str__(self) -> str:
        return f"#{self.raw}"

class String(Token):
    def __init__(self, raw: str = '', quote: str = '"'):
        self.quote = quote
        super().__init__(raw)

    def __str__(self) -> str:
        return f"{self.quote}{self.raw}{self.quote}"

class Delim(Token):
    def __init__(self, raw: str):
        if len(raw) > 1:
            raise ValueError("Delimiters may only be one codepoint long")
        super().__init__(raw)

class Comma(Delim): pass

class LParantheses(Token):
    @staticmethod
    def value() -> Literal['(']:
        return '('
class RParantheses(Token):
    @staticmethod
    def value() -> Literal[')']:
        return ')'

class Number(Token):
    value: float
    type: Literal['integer', 'number']
    def __init__(self, value: float, type: Literal['integer', 'number'], raw: str):
        self.value = value
        self.type = type
        super().__init__(raw)

class Percentage(Number):
    def __repr__(self) -> str:
        return f"Percentage({self.raw!r}%)"

    def __str__(self) -> str:
        return f"{self.raw}%"

class Dimension(Number):
    unit: str
    def __init__(self, value: float, type: Literal['integer', 'number'], unit: str, raw: str):
        self.unit = unit
        super().__init__(value, type, raw)

    @property
    def is_angle(self) -> bool:
        return self.unit.lower() in ANGLE_UNITS

    def degrees(self) -> float:
        """Value of an angle dimension converted to degrees."""
        if not self.is_angle:
            raise ValueError(f"{self.raw!r} is not an angle")
        return self.value * ANGLE_UNITS[self.unit.lower()]

class Whitespace(Token): pass
class EOF(Token): pass
