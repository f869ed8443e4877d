"""
  Lisp Reader, Lexer and Parser

- Streaming lexer, recursive-descent parser
- Emits Python primitives instead of Cons cells:

    - numbers -> float (always; there is one numeric type)
    - strings -> str (escapes resolved here)
    - true / false -> bool
    - nil -> Nil
    - symbols -> Symbol
    - lists -> Python list
    - 'x -> [Symbol("quote"), x]

The reader never evaluates anything. Errors carry the character offset
they were detected at.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from rsp import SExpression
from rsp.errors import RspParseError
from rsp.types.nil import Nil
from rsp.types.symbol import Symbol

Token = tuple[str, str, int]

TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # '
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<symbol>[^\s()\'";]+)'  # atoms: numbers, booleans, nil, symbols
    r")",
    re.DOTALL,
)

NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\Z")

ESCAPES: dict[str, str] = {
    '"': '"',
    "\\": "\\",
    "n": "\n",
    "t": "\t",
    "r": "\r",
}

QUOTE = Symbol("quote")


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value, position) tuples."""
    pos = 0
    n = len(source)

    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # Only whitespace can be left over here; anything else is a stray quote mark
            rest = source[pos:].lstrip()
            if not rest:
                break
            start = n - len(rest)
            if rest[0] == '"':
                raise RspParseError("unterminated string literal", start, incomplete=True)
            raise RspParseError(f"unexpected character {rest[0]!r}", start)
        if m.group("comment"):
            pos = m.end()
            continue
        for nm in ("quote", "lparen", "rparen", "string", "symbol"):
            if m.group(nm) is not None:
                yield nm, m.group(nm), m.start(nm)
                break
        pos = m.end()


def unescape(literal: str, position: int) -> str:
    """Resolve escapes in a string token, quotes included."""
    body = literal[1:-1]
    if "\\" not in body:
        return body
    out: list[str] = []
    i = 0
    while i < len(body):
        c = body[i]
        if c == "\\":
            nxt = body[i + 1]  # the lexer guarantees a following char
            if nxt not in ESCAPES:
                raise RspParseError(f"invalid escape '\\{nxt}' in string", position + i + 1)
            out.append(ESCAPES[nxt])
            i += 2
        else:
            out.append(c)
            i += 1
    return "".join(out)


def read_atom(token: str) -> SExpression:
    if token == "true":
        return True
    if token == "false":
        return False
    if token == "nil":
        return Nil
    if NUMBER_RE.match(token):
        return float(token)
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterator[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []
        self.last_pos = 0

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        tok = self.buffer.pop(0) if self.buffer else next(self.tokens, None)
        if tok is not None:
            self.last_pos = tok[2]
        return tok

    def parse_expr(self) -> SExpression:
        tok = self.advance()
        if tok is None:
            raise RspParseError("unexpected end of input", self.last_pos, incomplete=True)
        tok_type, tok_val, pos = tok

        if tok_type == "symbol":
            return read_atom(tok_val)

        if tok_type == "string":
            return unescape(tok_val, pos)

        if tok_type == "quote":
            if self.peek() is None:
                raise RspParseError("quote with no form after it", pos, incomplete=True)
            return [QUOTE, self.parse_expr()]

        if tok_type == "lparen":
            items = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise RspParseError("unmatched '('", pos, incomplete=True)
                if nxt[0] == "rparen":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise RspParseError("unexpected ')'", pos)

        raise RspParseError(f"unknown token {tok_val!r}", pos)

    def parse_all(self) -> Iterator[SExpression]:
        while self.peek() is not None:
            yield self.parse_expr()


def parse(source: str) -> list[SExpression]:
    """Read every top-level form in `source`.

    Fails as a whole on the first malformed form; no partial result escapes.
    """
    stream = TokenStream(lex(source))
    try:
        return list(stream.parse_all())
    except RecursionError:
        # One Python frame per nesting level
        raise RspParseError("nesting too deep", stream.last_pos) from None


def parse_one(source: str) -> SExpression:
    """Read exactly one form; trailing forms are an error."""
    forms = parse(source)
    if len(forms) != 1:
        raise RspParseError(f"expected exactly one form, found {len(forms)}", 0)
    return forms[0]
