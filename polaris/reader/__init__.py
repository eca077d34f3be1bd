from polaris.reader.parser import lex, tokenize, classify, parse, read, read_all, TokenStream

__all__ = ["lex", "tokenize", "classify", "parse", "read", "read_all", "TokenStream"]
