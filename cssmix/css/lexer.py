""" CSS VALUE LEXING
https://www.w3.org/TR/css-syntax-3/#tokenizer-algorithms

Tokenizes the right hand side of a declaration, e.g. `to top right, rgba(0, 0, 0, .5) 10%`.
Comments, at-keywords, blocks and urls are not part of any value the helpers accept so they
are not recognized.
"""

from __future__ import annotations
import re
from typing import Literal
from cssmix.css.tokens import *

__all__ = ["Check", "Lexer", "CSSParseError", "tokenize"]

REPLACEMENT_CHAR = '\uFFFD'

class Check:
    @staticmethod
    def letter(current: str | None) -> bool:
        return current is not None and current.isalpha()

    @staticmethod
    def non_ascii(current: str | None) -> bool:
        return current is not None and ord(current) >= ord('\u0080')

    @staticmethod
    def ident_start(current: str | None) -> bool:
        return current is not None and (Check.letter(current) or Check.non_ascii(current) or current == "_")

    @staticmethod
    def digit(current: str | None) -> bool:
        return current is not None and current in "0123456789"

    @staticmethod
    def whitespace(current: str | None) -> bool:
        return current is not None and current in '\t\n '

    @staticmethod
    def ident(current: str | None) -> bool:
        return current is not None and (
            Check.ident_start(current) or Check.digit(current) or current == "-"
        )

    @staticmethod
    def starts_with_ident(first: str | None, second: str | None) -> bool:
        if Check.ident_start(first):
            return True
        return first == "-" and (Check.ident_start(second) or second == "-")

    @staticmethod
    def starts_with_number(first: str | None, second: str | None, third: str | None) -> bool:
        if first is None:
            return False
        if first in "+-":
            if Check.digit(second):
                return True
            return second == "." and Check.digit(third)
        elif first == ".":
            return Check.digit(second)
        return Check.digit(first)


RETURNS = re.compile("\r\n|\f|\r")
class Lexer:
    def __init__(self, source: str) -> None:
        self.source: list[str] = list(RETURNS.sub("\n", source).replace('\u0000', REPLACEMENT_CHAR))

    def __iter__(self):
        return self

    def __next__(self) -> Token:
        next = self.consume()
        if isinstance(next, EOF):
            raise StopIteration
        return next

    def process(self) -> list[Token]:
        """Tokenize the entire source at once."""
        return [token for token in self]

    def peek(self, amount: int = 1) -> str | None:
        """The next code point."""
        if len(self.source) >= amount:
            return self.source[amount-1]
        return None

    def next(self) -> str | None:
        if len(self.source) >= 1:
            return self.source.pop(0)
        return None

    def _consume_whitespace_(self, current: str) -> Whitespace:
        whitespace = Whitespace(current)
        while Check.whitespace(self.peek()):
            whitespace.raw += self.next()
        return whitespace

    def _consume_string_(self, ending: str) -> String:
        string = String(quote=ending)
        escaped = False
        while True:
            next = self.next()
            if next is None:
                raise CSSParseError(f"String was not closed: {ending}{string.raw}")
            elif next == "\n" and not escaped:
                raise CSSParseError("Newline inside of string literal")
            elif next == "\\" and not escaped:
                escaped = True
                string.raw += next
            elif next == ending and not escaped:
                return string
            else:
                string.raw += next
                escaped = False

    def _consume_ident_(self) -> str:
        result = ''
        while Check.ident(self.peek()):
            result += self.next()
        return result

    def _consume_number_(self) -> tuple[float, Literal['integer', 'number'], str]:
        """Consume a number from the code points. Returning a numeric value and a type
        of either integer or number.
        """
        _type: Literal['integer', 'number'] = 'integer'
        raw = ''
        if (peek := self.peek()) is not None and peek in "-+":
            raw += self.next()

        while Check.digit(self.peek()):
            raw += self.next()

        if self.peek() == "." and Check.digit(self.peek(2)):
            raw += self.next()
            _type = "number"
            while Check.digit(self.peek()):
                raw += self.next()

        if (peek := self.peek()) is not None and peek in "Ee":
            sign = self.peek(2)
            if Check.digit(sign) or (sign is not None and sign in "-+" and Check.digit(self.peek(3))):
                _type = "number"
                raw += self.next() + self.next()
                while Check.digit(self.peek()):
                    raw += self.next()

        return float(raw), _type, raw

    def _consume_numeric_(self) -> Number:
        """Consume code points and produce a Number, Percentage, or Dimension token."""
        value, _type, raw = self._consume_number_()
        if Check.starts_with_ident(self.peek(), self.peek(2)):
            unit = self._consume_ident_()
            return Dimension(value, _type, unit, raw + unit)
        elif self.peek() == "%":
            self.next()
            return Percentage(value, _type, raw)
        return Number(value, _type, raw)

    def _consume_ident_like_(self) -> Ident | Function:
        ident = self._consume_ident_()
        if self.peek() == "(":
            self.next()
            return Function(ident)
        return Ident(ident)

    def consume(self) -> Token:
        """Consume code points and return the next token."""
        next = self.next()
        if next is None:
            return EOF()
        elif next in '"\'':
            return self._consume_string_(next)
        elif next == '#':
            if Check.ident(self.peek()):
                return Hash(self._consume_ident_())
            return Delim(next)
        elif next in "+-.":
            if Check.starts_with_number(next, self.peek(), self.peek(2)):
                self.source.insert(0, next)
                return self._consume_numeric_()
            elif next == "-" and Check.starts_with_ident(next, self.peek()):
                self.source.insert(0, next)
                return self._consume_ident_like_()
            return Delim(next)
        elif Check.digit(next):
            self.source.insert(0, next)
            return self._consume_numeric_()
        elif Check.ident_start(next):
            self.source.insert(0, next)
            return self._consume_ident_like_()
        elif Check.whitespace(next):
            return self._consume_whitespace_(next)
        elif next == "(":
            return LParantheses(next)
        elif next == ")":
            return RParantheses(next)
        elif next == ",":
            return Comma(next)
        return Delim(next)

class CSSParseError(Exception): pass

def tokenize(source: str) -> list[Token]:
    return Lexer(source).process()
