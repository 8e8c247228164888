"""Front end for a small C compiler: lexer, tokens, precedence, nodes, scopes and symbols."""

__version__ = "0.1.0"

__all__ = ["lexer", "nodes", "precedence", "scope", "source", "symbols", "tokens"]