"""ANSI syntax highlighting for rsp source and printed values.

Never fails: text the reader would reject (an open string, a stray
character) is colored as far as it can be and passed through otherwise.
"""

from __future__ import annotations

import re

from rsp.evaluation.special_forms.keywords import KEYWORDS
from rsp.reader.parser import NUMBER_RE

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_STRING = "\033[32m"
COLOR_COMMENT = "\033[90m"
COLOR_NUMBER = "\033[35m"
COLOR_KEYWORD = "\033[1;36m"
COLOR_CONSTANT = "\033[33m"
COLOR_PAREN = "\033[34m"

CONSTANTS = frozenset({"true", "false", "nil"})
KEYWORD_NAMES = frozenset(k.id for k in KEYWORDS)

HIGHLIGHT_RE = re.compile(
    r'(?P<string>"(?:\\.|[^\\"])*"?)'  # closing quote optional
    r"|(?P<comment>;[^\n]*)"
    r"|(?P<paren>[()])"
    r'|(?P<atom>[^\s()\'";]+)'
)


def _atom_color(atom: str) -> str | None:
    if atom in KEYWORD_NAMES:
        return COLOR_KEYWORD
    if atom in CONSTANTS:
        return COLOR_CONSTANT
    if NUMBER_RE.match(atom):
        return COLOR_NUMBER
    return None


def colorize(text: str, color: str | None) -> str:
    return f"{color}{text}{RESET}" if color else text


def highlight(source: str) -> str:
    out: list[str] = []
    pos = 0
    for m in HIGHLIGHT_RE.finditer(source):
        out.append(source[pos:m.start()])
        kind = m.lastgroup
        text = m.group()
        if kind == "string":
            out.append(colorize(text, COLOR_STRING))
        elif kind == "comment":
            out.append(colorize(text, COLOR_COMMENT))
        elif kind == "paren":
            out.append(colorize(text, COLOR_PAREN))
        else:
            out.append(colorize(text, _atom_color(text)))
        pos = m.end()
    out.append(source[pos:])
    return "".join(out)
