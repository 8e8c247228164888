# clexkit

The front end of a small C compiler, as a Python library. It turns C source
text into tokens and provides building blocks a parser can use on top of
them: operator precedence tables, syntax tree nodes with a node stack, nested
scopes and symbol tables.

## What it contains

- `clexkit.tokens`: `Token`, `TokenType`, `Position` and `CompilerError`.
  Tokens can be asked `is_keyword`, `is_symbol`, `is_operator` and
  `is_discardable` (true for newlines, comments and the `\` symbol).
- `clexkit.lexer`: the `Lexer` class with its `tokenize` method, plus
  `lex_string`, `lex_file`, `format_token_list`, `is_keyword` and
  `is_valid_operator`.
- `clexkit.source`: `SourceReader`, which hands out characters one at a time
  (`next_char`, `peek_char`, `push_char`) while tracking line and column, and
  `open_source`, which reads a file into a `SourceReader`.
- `clexkit.precedence`: the C operator precedence groups (`OP_PRECEDENCE`,
  `PrecedenceGroup`, `Associativity`) with `precedence_of` and
  `associativity_of`.
- `clexkit.nodes`: `Node`, `NodeType`, `NodeFlag`, `Datatype`,
  `DatatypeFlag`, `DatatypeKind` and `NodeStack` (`push`, `pop`, `peek`,
  `peek_or_none`, `peek_expressionable_or_none`, `create`, `make_exp`).
- `clexkit.scope`: `Scope` and `ScopeManager` for nested scopes and the
  entities declared in them.
- `clexkit.symbols`: `Symbol`, `SymbolType` and `SymbolResolver`, which
  keeps a stack of symbol tables and registers variables, functions and
  structures.

## Tokenizing

```python
from clexkit.lexer import lex_string, format_token_list

tokens = lex_string("int a = 0x011;\n", "example.c")
print(format_token_list(tokens))
```

The lexer recognises keywords, identifiers, decimal, hexadecimal (`0x...`)
and binary (`0b...`) numbers, character literals (given as `NUMBER` tokens
holding the character code) with the escapes `\n`, `\t`, `\\` and `\'`,
string literals, `#include <...>` paths, one-line and multi-line comments,
operators and symbols. Each token records a position and whether whitespace
follows it. Tokens read inside parentheses also carry, in
`between_brackets`, the text read while those parentheses were open.

`lex_file(path)` tokenizes a file the same way. `format_token_list` renders
a list of tokens one per line, for example `TOKEN\tKE: int`.

## Errors

Invalid input raises `CompilerError`, whose message names the line, column
and file where the problem was found: an unknown character, an invalid
operator, an unterminated multi-line comment, a malformed binary number, an
unclosed character literal, or a `)` with no matching `(`.

## Precedence

```python
from clexkit.precedence import precedence_of, associativity_of, Associativity

assert precedence_of("*") < precedence_of("+")
assert associativity_of("=") is Associativity.RIGHT_TO_LEFT
```

A lower number binds more tightly. An unknown operator raises `ValueError`.

## Scopes and symbols

```python
from clexkit.scope import ScopeManager
from clexkit.symbols import SymbolResolver, SymbolType

scopes = ScopeManager()
scopes.create_root()
scopes.new(0)
scopes.push("x", 4)
assert scopes.last_entity() == "x"
scopes.finish()

resolver = SymbolResolver()
resolver.register_symbol("main", SymbolType.NODE, None)
assert resolver.get_symbol("main") is not None
```

Registering a name that already exists in the active table returns `None`.
`new_table` and `end_table` open and close nested tables. `build_for_node`
registers the symbol introduced by a variable, function or struct node; a
variable node is also pushed into the current scope with its type's size.

## What it does not do

The package stops at tokens and the structures around them. It has no
parser that builds a syntax tree from tokens, no type checking, no code
generation and no command-line program; nodes, scopes and symbols are built
by the calling code.