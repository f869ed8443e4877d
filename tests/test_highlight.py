import re

import pytest
from hypothesis import given, strategies as st

from rsp.highlight import (
    COLOR_COMMENT,
    COLOR_CONSTANT,
    COLOR_KEYWORD,
    COLOR_NUMBER,
    COLOR_PAREN,
    COLOR_STRING,
    RESET,
    highlight,
)

ANSI_RE = re.compile(r"\033\[[0-9;]*m")


def _strip(text):
    return ANSI_RE.sub("", text)


@pytest.mark.parametrize(
    "source,color,token",
    [
        ('"hi there"', COLOR_STRING, '"hi there"'),
        ("; note", COLOR_COMMENT, "; note"),
        ("42", COLOR_NUMBER, "42"),
        ("-1.5e3", COLOR_NUMBER, "-1.5e3"),
        ("let", COLOR_KEYWORD, "let"),
        ("require", COLOR_KEYWORD, "require"),
        ("nil", COLOR_CONSTANT, "nil"),
        ("false", COLOR_CONSTANT, "false"),
        ("(", COLOR_PAREN, "("),
    ]
)
def test_token_colors(source, color, token):
    assert highlight(source) == f"{color}{token}{RESET}"


def test_plain_symbols_are_not_colored():
    assert highlight("math/+") == "math/+"
    assert highlight("letter") == "letter"


def test_whitespace_and_quote_pass_through():
    out = highlight("(let x  'y)")
    assert out == (
        f"{COLOR_PAREN}({RESET}{COLOR_KEYWORD}let{RESET} x  'y{COLOR_PAREN}){RESET}"
    )


def test_open_string_is_colored_to_end():
    assert highlight('(f "abc') == f'{COLOR_PAREN}({RESET}f {COLOR_STRING}"abc{RESET}'


def test_semicolon_inside_string_is_not_a_comment():
    assert highlight('"a;b"') == f'{COLOR_STRING}"a;b"{RESET}'


@given(st.text(max_size=60).filter(lambda s: "\033" not in s))
def test_highlight_keeps_text(source):
    # Coloring never drops or reorders characters
    assert _strip(highlight(source)) == source
