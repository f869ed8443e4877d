"""Names of the special forms. These are reserved: `let`, `define` and `fn`
refuse to bind them."""

from rsp.types.symbol import Symbol

QUOTE = Symbol("quote")
LET = Symbol("let")
DEFINE = Symbol("define")
IF = Symbol("if")
FN = Symbol("fn")
REQUIRE = Symbol("require")

KEYWORDS = frozenset({QUOTE, LET, DEFINE, IF, FN, REQUIRE})


def is_special_form(name: Symbol) -> bool:
    return name in KEYWORDS
