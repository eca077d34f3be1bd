"""
  Polaris Reader: tokenizer and parser

- Tokens are plain strings:
    - "(" and ")" stand alone
    - a double-quoted string literal (with \\" escapes and inner whitespace)
      stays inside a single token
    - any other run of characters up to whitespace or a paren is one token
- Atoms are classified by their text:
    - [+-]?(digits)?(.digits)? with at least one digit -> Integer, or Double
      when a '.' is present
    - "..." -> String with the quotes stripped
    - anything else -> Symbol
- Lists become ListCell; nothing else is special to the reader (no quote
  shorthand, no comments: the Feeder strips those before reading).
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional

from polaris import SExpression
from polaris.errors import MalformedForm
from polaris.types.cell import Double, Integer, ListCell, String, Symbol

TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<paren>[()])"  # ( or )
    r'|(?P<atom>(?:"(?:\\.|[^\\"])*"?|[^\s()"])+)'  # strings glued to any other run
    r")",
    re.DOTALL,
)

NUMBER_RE = re.compile(r"[+-]?([0-9]*\.)?[0-9]+")


def lex(source: str) -> Iterator[str]:
    """Token generator over `source`."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # only trailing whitespace left
            break
        yield m.group("paren") or m.group("atom")
        pos = m.end()


def tokenize(source: str) -> list[str]:
    return list(lex(source))


def classify(token: str) -> SExpression:
    """Classify a single non-paren token."""
    if NUMBER_RE.fullmatch(token):
        if "." in token:
            return Double(token)
        return Integer(token)
    if len(token) >= 2 and token.startswith('"') and token.endswith('"'):
        return String(token[1:-1])
    return Symbol(token)


class TokenStream:
    def __init__(self, tokens: Iterable[str]):
        self.tokens = iter(tokens)
        self.buffer: list[str] = []

    def peek(self) -> Optional[str]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[str]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def parse_expr(self) -> SExpression:
        token = self.advance()
        if token is None:
            raise MalformedForm("Unexpected end of input")

        if token == "(":
            items = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise MalformedForm("Unexpected end of input, expected ')'")
                if nxt == ")":
                    self.advance()
                    break
                items.append(self.parse_expr())
            return ListCell(items)

        if token == ")":
            raise MalformedForm("Unexpected ')'")

        return classify(token)

    def parse_all(self) -> Iterator[SExpression]:
        while self.peek() is not None:
            yield self.parse_expr()


def parse(tokens: Iterable[str]) -> SExpression:
    """Parse exactly one form from a balanced token sequence."""
    return TokenStream(tokens).parse_expr()


def read(source: str) -> SExpression:
    return parse(lex(source))


def read_all(source: str) -> list[SExpression]:
    return list(TokenStream(lex(source)).parse_all())
