# disa

`disa` splits the source text of a small subset of C into tokens. It knows
these kinds of token:

- keywords
- assignment, relational, logic, bitwise and arithmetic operators
- separators
- character, integer and string literals
- identifiers

## Installation

```
pip install .
```

## Tokenizing a file

```python
from disa.tokenizer import Tokenizer
from disa.token import format_tokens

tokenizer = Tokenizer()
tokenizer.tokenize("program.c")
tokens = tokenizer.take_tokens()
print(format_tokens(tokens))
# tlist[K_INT, ID(main), S_OP, K_VOID, S_CP, S_OC, ...]
```

`Tokenizer.tokenize` reads the file in chunks of 4096 characters. If a token
is cut off at the end of one chunk, the tokenizer keeps it and finishes it
with the next chunk.

A malformed character literal, such as `''` or `'\q'`, raises
`disa.tokenizer.TokenizerError`. A path that does not exist raises the usual
`OSError`. A path that names a directory raises `IsADirectoryError`.

Some problems are reported through the `logging` module and tokenizing goes
on:

- A character that no matcher recognises is logged as a warning and skipped.
- An integer literal too large for a signed 64-bit value is logged as an
  error.
- Text still unfinished at the end of the file is logged as a warning and
  gives no token. This includes an identifier or number that ends exactly at
  the end of the file.

You can also feed text in pieces with `Tokenizer.feed(chunk)`.
`take_tokens()` returns the tokens collected so far and leaves the tokenizer
with none.

## Matching single tokens

Each kind of token has its own matcher:

- `match_keyword`
- `match_assignment_operator`
- `match_relational_operator`
- `match_logic_operator`
- `match_bitwise_operator`
- `match_arithmetic_operator`
- `match_separator`
- `match_char_literal`
- `match_integer_literal`
- `match_string_literal`
- `match_identifier`

A matcher skips any leading whitespace and returns a `MatchResult`. The
result holds three things:

- `match`: the `Match` outcome
- `token`: the token that was recognised, if any
- `rest`: the text that is left, with whitespace after the token skipped

```python
from disa.tokenizer import Match, match_assignment_operator

result = match_assignment_operator(" += next")
assert result.match is Match.FULL
assert result.rest == "next"
```

The outcome is one of these:

| Outcome | Meaning |
| --- | --- |
| `Match.ERR` | The input is malformed, or the input was `None`. |
| `Match.NONE` | No token of this kind starts the text. |
| `Match.PARTIAL` | The text ends in the middle of a token that might still match. |
| `Match.FULL` | A token of this kind was recognised. |
| `Match.FULL_DIFF` | A token of a related kind was recognised. For example, `match_logic_operator` finds `!=`, or `match_arithmetic_operator` finds `+=`. |

`str(Match.FULL)` gives `MATCH_FULL`.

The symbol tables the matchers use are public tuples in `disa.tokenizer`:

- `KEYWORDS`
- `ASSIGNMENT_OPERATORS`
- `RELATIONAL_OPERATORS`
- `LOGIC_OPERATORS`
- `BITWISE_OPERATORS`
- `ARITHMETIC_OPERATORS`
- `SEPARATORS`

## Tokens

A `disa.token.Token` is a frozen dataclass. It has a `TokenType` and an
optional `value`. Only these four types may carry a value:

- `L_C`: a single character
- `L_I`: an int that fits in 64 bits
- `L_S`: a str
- `ID`: a str

These four types are listed in `VALUED_TYPES`. `has_value()` tells whether a
token carries data.

The helpers `new_char`, `new_int`, `new_string` and `new_id` build literal and
identifier tokens. `str(token)` gives forms such as `K_INT`, `L_I(5)` or
`ID(x)`. `format_tokens(tokens)` renders a sequence of tokens as
`tlist[...]`.

## What it does not do

`disa` only produces tokens. It does not parse, check or compile the token
stream. It has no command-line program: call it from Python.