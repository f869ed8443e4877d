from rsp.reader.parser import lex, parse, parse_one, TokenStream

__all__ = ["lex", "parse", "parse_one", "TokenStream"]
