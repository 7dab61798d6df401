"""
References:
    - [syntax](https://www.w3.org/TR/css-syntax-3/)
    - [values](https://developer.mozilla.org/en-US/docs/Web/CSS/CSS_Values_and_Units)
    - [angle](https://developer.mozilla.org/en-US/docs/Web/CSS/angle)

<value>
    <component/> <whitespace/> <component/>, <component/>
</value>

component => ident, number, percentage, dimension, hash, string, function(...)
"""

from cssmix.css.lexer import CSSParseError, Lexer, tokenize
from cssmix.css.parser import FunctionBlock, Parse, serialize

__all__ = ["CSSParseError", "Lexer", "tokenize", "FunctionBlock", "Parse", "serialize"]
