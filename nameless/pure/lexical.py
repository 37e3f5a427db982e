"""Lexical analysis for lambda calculus input. Produces a flat token list ending in a synthesized EOF token.

```
<λ>      ::= "\" | "λ"
<ident>  ::= [A-Za-z]+     ; maximal run of ASCII letters
<punct>  ::= "." | "=" | "(" | ")"
```

Whitespace separates tokens and is otherwise ignored. Anything else is a LexicalError.
"""

from enum import Enum
from typing import NamedTuple, Optional

from nameless.lang.error import LexicalError


class TokenType(Enum):
    LAMBDA = "\\"
    DOT = "."
    EQUAL = "="
    LPAREN = "("
    RPAREN = ")"
    IDENT = "identifier"
    EOF = "end of input"


class Token(NamedTuple):
    type: TokenType
    value: Optional[str] = None
    pos: int = 0

    def __str__(self):
        if self.type is TokenType.IDENT:
            return f"'{self.value}'"
        elif self.type is TokenType.EOF:
            return self.type.value
        return f"'{self.type.value}'"


PUNCTUATION = {
    "\\": TokenType.LAMBDA,
    "λ": TokenType.LAMBDA,
    ".": TokenType.DOT,
    "=": TokenType.EQUAL,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}


def is_letter(char):
    return "a" <= char <= "z" or "A" <= char <= "Z"


def tokenize(expr):
    """Returns the tokens of expr. Raises LexicalError on the first character outside the token alphabet."""
    tokens = []
    pos = 0

    while pos < len(expr):
        char = expr[pos]

        if char.isspace():
            pos += 1

        elif is_letter(char):
            start = pos
            while pos < len(expr) and is_letter(expr[pos]):
                pos += 1
            tokens.append(Token(TokenType.IDENT, expr[start:pos], start))

        elif char in PUNCTUATION:
            tokens.append(Token(PUNCTUATION[char], pos=pos))
            pos += 1

        else:
            raise LexicalError("'{}' contains unrecognized character '{}'", (expr, char), start=pos, end=pos + 1)

    tokens.append(Token(TokenType.EOF, pos=len(expr)))
    return tokens
