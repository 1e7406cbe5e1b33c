"""
  Cinder Reader: Lexer and Parser

- Lazy tokenizing, one line of the source at a time
- One token of pushback, which is all the list grammar needs
- Nesting is tracked on an explicit stack, not the Python call stack
- Emits runtime values directly (code is data):

    - integers -> int
    - #t / #f -> bool
    - strings -> str
    - identifiers -> Symbol
    - lists -> Pair chains ending in Nil
    - dotted lists -> Pair chains ending in the dotted tail
    - 'x -> (quote x)
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Optional, TextIO

from cinder import SExpression
from cinder.types.errors import CinderSyntaxError
from cinder.types.pair import from_iterable, make_list
from cinder.types.symbol import Symbol

logger = logging.getLogger(__name__)

Token = tuple[Optional[str], object]
EOF_TOKEN: Token = (None, None)

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

QUOTE = Symbol("quote")

TOKEN_RE = re.compile(
    r"(?P<space>\s+)"
    r"|(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<bool>#[tf])"  # #t / #f
    r"|(?P<hash>#.?)"  # any other # sequence is an error token
    r"|(?P<int>\d+)"
    r"|(?P<id>[^\W\d][\w\-*+?!<>=]*|[\-*+?!<>=][\w\-*+?!<>=]*)"
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<dot>\.)"
    r"|(?P<quote>')"
    r"|(?P<err>.)",
    re.DOTALL,
)

SIGNED_INT_RE = re.compile(r"[+-]\d+")


def _source_lines(source: str | TextIO) -> Iterator[str]:
    if isinstance(source, str):
        return iter((source,))
    return iter(source.readline, "")


def _read_string(line: str, pos: int, lines: Iterator[str]) -> tuple[str, str, int]:
    """Read a string body starting just after the opening quote.

    Only \\n is a real escape; any other escaped character stands for
    itself. A string may run over several lines, so more are pulled from
    `lines` as needed. Returns the text plus the line and position to
    resume lexing at. An unterminated string yields what was read so far.
    """
    chars: list[str] = []
    escaped = False
    while True:
        if pos >= len(line):
            next_line = next(lines, None)
            if next_line is None:
                if escaped:
                    chars.append("\\")
                logger.warning("unterminated string literal at end of input")
                return "".join(chars), "", 0
            line, pos = next_line, 0
            continue
        ch = line[pos]
        pos += 1
        if escaped:
            chars.append("\n" if ch == "n" else ch)
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch == '"':
            return "".join(chars), line, pos
        else:
            chars.append(ch)


def _int_token(text: str) -> Token:
    value = int(text)
    if not INT64_MIN <= value <= INT64_MAX:
        return "err", text
    return "int", value


def lex(source: str | TextIO) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value) tuples.

    Token types: id, str, int, bool, err, lparen, rparen, dot, quote.
    A stream is consumed a line at a time, so tokens are available as soon
    as their line has been read.
    """
    lines = _source_lines(source)
    for line in lines:
        pos = 0
        while pos < len(line):
            if line[pos] == '"':
                text, line, pos = _read_string(line, pos + 1, lines)
                yield "str", text
                continue

            m = TOKEN_RE.match(line, pos)
            pos = m.end()
            kind = m.lastgroup
            text = m.group()
            if kind in ("space", "comment"):
                continue
            if kind == "bool":
                yield "bool", text == "#t"
            elif kind == "int":
                yield _int_token(text)
            elif kind == "id":
                if SIGNED_INT_RE.fullmatch(text):
                    yield _int_token(text)
                else:
                    yield "id", text
            elif kind == "hash":
                yield "err", text
            else:
                yield kind, text


class _OpenList:
    """A list whose closing parenthesis has not been read yet."""

    __slots__ = ("items", "allow_dot", "dotted", "tail")

    def __init__(self, allow_dot: bool):
        self.items: list[SExpression] = []
        self.allow_dot = allow_dot
        self.dotted = False
        self.tail: Optional[list[SExpression]] = None

    def add(self, value: SExpression) -> None:
        if self.dotted:
            self.tail = [value]
        else:
            self.items.append(value)
            self.allow_dot = True

    def close(self) -> SExpression:
        if self.tail is not None:
            return from_iterable(self.items, self.tail[0])
        return from_iterable(self.items)


class TokenStream:
    """S-expression parser over a token iterator."""

    def __init__(self, token_iter: Iterator[Token]):
        self.tokens = iter(token_iter)
        self.pushback: list[Token] = []

    def next_token(self) -> Token:
        if self.pushback:
            return self.pushback.pop()
        return next(self.tokens, EOF_TOKEN)

    def unget(self, token: Token) -> None:
        self.pushback.append(token)

    def at_eof(self) -> bool:
        token = self.next_token()
        self.unget(token)
        return token[0] is None

    def read(self) -> Optional[SExpression]:
        """Read the next top-level form, or return None at end of input."""
        if self.at_eof():
            return None
        return self.read_sexp()

    def read_sexp(self) -> SExpression:
        return self._read_form([])

    def read_sexp_list(self, allow_dot: bool) -> SExpression:
        """Read the rest of a list after its opening parenthesis.

        A dot is legal anywhere except before the first element; it must be
        followed by exactly one form and then ')'.
        """
        return self._read_form([_OpenList(allow_dot)])

    def _read_form(self, stack: list[Optional[_OpenList]]) -> SExpression:
        """Read until the outermost entry of `stack` is complete.

        Stack entries are open lists, or None for a pending quote. An empty
        stack reads a single form.
        """
        while True:
            tok_type, tok_val = self.next_token()
            top = stack[-1] if stack else None

            if top is not None and top.tail is not None:
                if tok_type != "rparen":
                    raise CinderSyntaxError("expected ')' after dotted tail")
                stack.pop()
                value = top.close()
            elif tok_type == "lparen":
                stack.append(_OpenList(allow_dot=False))
                continue
            elif tok_type == "quote":
                stack.append(None)
                continue
            elif tok_type == "int" or tok_type == "bool" or tok_type == "str":
                value = tok_val
            elif tok_type == "id":
                value = Symbol(tok_val)
            elif top is not None and not top.dotted and tok_type == "rparen":
                stack.pop()
                value = top.close()
            elif top is not None and not top.dotted and tok_type == "dot":
                if not top.allow_dot:
                    raise CinderSyntaxError("unexpected '.' at start of list")
                top.dotted = True
                continue
            elif tok_type is None:
                if top is not None and not top.dotted:
                    raise CinderSyntaxError("unexpected end of input, expected ')'")
                raise CinderSyntaxError("unexpected end of input")
            elif top is not None and not top.dotted:
                raise CinderSyntaxError(f"unexpected token {tok_val!r} in list")
            else:
                raise CinderSyntaxError(f"unexpected token {tok_val!r}")

            # Hand the finished value to whatever encloses it.
            while stack and stack[-1] is None:
                stack.pop()
                value = make_list(QUOTE, value)
            if not stack:
                return value
            stack[-1].add(value)

    def parse_all(self) -> Iterator[SExpression]:
        while (expr := self.read()) is not None:
            yield expr


def read(text: str) -> Optional[SExpression]:
    """Read the first form in `text`; None if it holds no form.

    To read a stream form by form, keep one TokenStream over `lex(stream)`.
    """
    return TokenStream(lex(text)).read()


def read_all(source: str | TextIO) -> list[SExpression]:
    return list(TokenStream(lex(source)).parse_all())
