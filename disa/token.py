"""Token kinds and token values produced by the tokenizer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union

__all__ = [
    "TokenType",
    "Token",
    "TokenValue",
    "VALUED_TYPES",
    "new_char",
    "new_int",
    "new_string",
    "new_id",
    "format_tokens",
]

TokenValue = Union[str, int, None]

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class TokenType(Enum):
    """Every kind of token the tokenizer can produce.

    The order is significant: operator families are laid out so that a
    position inside a symbol table maps onto a member by offset.
    """

    # Keywords
    K_VOID = 0
    K_CHAR = 1
    K_SHORT = 2
    K_INT = 3
    K_LONG = 4
    K_RETURN = 5
    K_IF = 6
    K_ELSE = 7
    K_WHILE = 8
    K_FOR = 9
    K_CONTINUE = 10
    K_BREAK = 11
    K_SIGNED = 12
    K_UNSIGNED = 13

    # Assignment operators
    SO_SIMPLE = 14
    SO_ADD = 15
    SO_SUB = 16
    SO_MUL = 17
    SO_DIV = 18
    SO_MOD = 19
    SO_OR = 20
    SO_AND = 21
    SO_XOR = 22
    SO_LSHIFT = 23
    SO_RSHIFT = 24

    # Relational operators
    RO_EQ = 25
    RO_NEQ = 26
    RO_LT = 27
    RO_LE = 28
    RO_GT = 29
    RO_GE = 30

    # Logic operators
    LO_NOT = 31
    LO_OR = 32
    LO_AND = 33

    # Bitwise operators
    BW_NOT = 34
    BW_OR = 35
    BW_AND = 36
    BW_XOR = 37
    BW_LSHIFT = 38
    BW_RSHIFT = 39

    # Arithmetic operators
    AO_SUM = 40
    AO_SUB = 41
    AO_MUL = 42
    AO_DIV = 43
    AO_MOD = 44

    # Separators
    S_SQ = 45
    S_DQ = 46
    S_QM = 47
    S_OP = 48
    S_CP = 49
    S_OS = 50
    S_CS = 51
    S_OC = 52
    S_CC = 53
    S_COM = 54
    S_COL = 55
    S_SCOL = 56

    # Literals
    L_C = 57
    L_I = 58
    L_S = 59

    # Identifiers
    ID = 60

    T_NOVALUE = 61

    def __str__(self) -> str:
        return self.name


VALUED_TYPES = frozenset({TokenType.L_C, TokenType.L_I, TokenType.L_S, TokenType.ID})


@dataclass(frozen=True)
class Token:
    """A token, optionally carrying a literal value or identifier name."""

    type: TokenType
    value: TokenValue = None

    def __post_init__(self) -> None:
        if self.value is None:
            return
        if self.type not in VALUED_TYPES:
            raise ValueError(f"token type {self.type} does not carry a value")
        if self.type is TokenType.L_C:
            if not isinstance(self.value, str) or len(self.value) != 1:
                raise ValueError("a character literal holds exactly one character")
        elif self.type is TokenType.L_I:
            if isinstance(self.value, bool) or not isinstance(self.value, int):
                raise TypeError("an integer literal holds an int")
            if not _INT64_MIN <= self.value <= _INT64_MAX:
                raise OverflowError(f"integer literal {self.value} does not fit in 64 bits")
        elif not isinstance(self.value, str):
            raise TypeError(f"token type {self.type} holds a str")

    def has_value(self) -> bool:
        """Whether the token carries data besides its type."""
        return self.value is not None

    def __str__(self) -> str:
        if self.value is None:
            return str(self.type)
        return f"{self.type}({self.value})"


def new_char(value: str) -> Token:
    """A character literal token."""
    return Token(TokenType.L_C, value)


def new_int(value: int) -> Token:
    """An integer literal token; the value must fit in a signed 64-bit integer."""
    return Token(TokenType.L_I, value)


def new_string(value: str) -> Token:
    """A string literal token."""
    return Token(TokenType.L_S, value)


def new_id(name: str) -> Token:
    """An identifier token."""
    return Token(TokenType.ID, name)


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render a sequence of tokens as a bracketed, comma separated list."""
    return "tlist[" + ", ".join(str(token) for token in tokens) + "]"