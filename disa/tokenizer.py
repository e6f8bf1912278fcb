"""Matching of individual tokens and chunked tokenization of source text."""

from __future__ import annotations

import logging
import os
import stat
import string
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence

from disa.token import Token, TokenType, new_char, new_id, new_int, new_string

__all__ = [
    "KEYWORDS",
    "ASSIGNMENT_OPERATORS",
    "RELATIONAL_OPERATORS",
    "LOGIC_OPERATORS",
    "BITWISE_OPERATORS",
    "ARITHMETIC_OPERATORS",
    "SEPARATORS",
    "Match",
    "MatchResult",
    "TokenizerError",
    "match_keyword",
    "match_assignment_operator",
    "match_relational_operator",
    "match_logic_operator",
    "match_bitwise_operator",
    "match_arithmetic_operator",
    "match_separator",
    "match_char_literal",
    "match_integer_literal",
    "match_string_literal",
    "match_identifier",
    "Tokenizer",
]

_log = logging.getLogger(__name__)

_PARTIAL_SIZE = 256
_CHUNK_SIZE = 4096
_ID_MAX = 256
_INT64_MAX = 2**63 - 1

KEYWORDS = (
    "void", "char", "short", "int", "long", "return", "if",
    "else", "while", "for", "continue", "break", "signed", "unsigned",
)
ASSIGNMENT_OPERATORS = ("=", "+=", "-=", "*=", "/=", "%=", "|=", "&=", "^=", "<<=", ">>=")
RELATIONAL_OPERATORS = ("==", "!=", "<", "<=", ">", ">=")
LOGIC_OPERATORS = ("!", "||", "&&")
BITWISE_OPERATORS = ("~", "|", "&", "^", "<<", ">>")
ARITHMETIC_OPERATORS = ("+", "-", "*", "/", "%")
SEPARATORS = ("'", '"', "?", "(", ")", "[", "]", "{", "}", ",", ":", ";")

_SPACES = " \t\n\v\f\r"
_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)
_WORD = _DIGITS | _LETTERS | {"_"}

_ESCAPES = {"n": "\n", "t": "\t", "\\": "\\", "'": "'", '"': '"'}


class Match(Enum):
    """Outcome of trying to match a token at the start of some text."""

    ERR = -1
    NONE = 0
    PARTIAL = 1
    FULL = 2
    FULL_DIFF = 3

    def __str__(self) -> str:
        return f"MATCH_{self.name}"


@dataclass(frozen=True)
class MatchResult:
    """What a matcher found, and the text left after it."""

    match: Match
    rest: Optional[str]
    token: Optional[Token] = None


class TokenizerError(Exception):
    """Raised when the input holds a malformed token."""


def _skip_spaces(text: str) -> str:
    return text.lstrip(_SPACES)


def _char_at(text: str, index: int) -> str:
    return text[index] if index < len(text) else ""


def _full(token: Token, text: str, consumed: int, match: Match = Match.FULL) -> MatchResult:
    return MatchResult(match, _skip_spaces(text[consumed:]), token)


def _offset(base: TokenType, index: int) -> TokenType:
    return TokenType(base.value + index)


_Action = Callable[[str, int, int], MatchResult]


def _match_symbols(
    text: Optional[str], symbols: Sequence[str], action: _Action, instant_match: bool
) -> MatchResult:
    if text is None:
        return MatchResult(Match.ERR, None)
    text = _skip_spaces(text)

    for index, symbol in enumerate(symbols):
        if len(text) < len(symbol):
            if symbol.startswith(text):
                return MatchResult(Match.PARTIAL, text)
            continue
        if text.startswith(symbol) and (
            instant_match or _char_at(text, len(symbol)) not in _WORD
        ):
            return action(text, index, len(symbol))

    return MatchResult(Match.NONE, text)


def _keyword_action(text: str, index: int, length: int) -> MatchResult:
    return _full(Token(_offset(TokenType.K_VOID, index)), text, length)


def _assignment_action(text: str, index: int, length: int) -> MatchResult:
    return _full(Token(_offset(TokenType.SO_SIMPLE, index)), text, length)


def _relational_action(text: str, index: int, length: int) -> MatchResult:
    first = RELATIONAL_OPERATORS[index][0]
    if first in "<>" and _char_at(text, length) == "=":
        kind = TokenType.RO_LE if first == "<" else TokenType.RO_GE
        return _full(Token(kind), text, length + 1)
    return _full(Token(_offset(TokenType.RO_EQ, index)), text, length)


def _logic_action(text: str, index: int, length: int) -> MatchResult:
    if LOGIC_OPERATORS[index][0] == "!" and _char_at(text, length) == "=":
        return _full(Token(TokenType.RO_NEQ), text, length + 1, Match.FULL_DIFF)
    return _full(Token(_offset(TokenType.LO_NOT, index)), text, length)


def _bitwise_action(text: str, index: int, length: int) -> MatchResult:
    if _char_at(text, length) == "=" and BITWISE_OPERATORS[index][0] != "~":
        kind = _offset(TokenType.SO_SIMPLE, index + 5)
        return _full(Token(kind), text, length + 1, Match.FULL_DIFF)
    return _full(Token(_offset(TokenType.BW_NOT, index)), text, length)


def _arithmetic_action(text: str, index: int, length: int) -> MatchResult:
    if _char_at(text, length) == "=":
        kind = _offset(TokenType.SO_SIMPLE, index + 1)
        return _full(Token(kind), text, length + 1, Match.FULL_DIFF)
    return _full(Token(_offset(TokenType.AO_SUM, index)), text, length)


def _separator_action(text: str, index: int, length: int) -> MatchResult:
    return _full(Token(_offset(TokenType.S_SQ, index)), text, length)


def match_keyword(text: Optional[str]) -> MatchResult:
    """Match a keyword that is not followed by an identifier character."""
    return _match_symbols(text, KEYWORDS, _keyword_action, False)


def match_assignment_operator(text: Optional[str]) -> MatchResult:
    """Match an assignment operator."""
    return _match_symbols(text, ASSIGNMENT_OPERATORS, _assignment_action, True)


def match_relational_operator(text: Optional[str]) -> MatchResult:
    """Match a relational operator."""
    return _match_symbols(text, RELATIONAL_OPERATORS, _relational_action, True)


def match_logic_operator(text: Optional[str]) -> MatchResult:
    """Match a logic operator; '!=' is reported as a relational operator."""
    return _match_symbols(text, LOGIC_OPERATORS, _logic_action, True)


def match_bitwise_operator(text: Optional[str]) -> MatchResult:
    """Match a bitwise operator; a following '=' makes it an assignment."""
    return _match_symbols(text, BITWISE_OPERATORS, _bitwise_action, True)


def match_arithmetic_operator(text: Optional[str]) -> MatchResult:
    """Match an arithmetic operator; a following '=' makes it an assignment."""
    return _match_symbols(text, ARITHMETIC_OPERATORS, _arithmetic_action, True)


def match_separator(text: Optional[str]) -> MatchResult:
    """Match a separator character."""
    return _match_symbols(text, SEPARATORS, _separator_action, True)


def match_char_literal(text: Optional[str]) -> MatchResult:
    """Match a character literal such as 'x' or '\\n'."""
    if text is None:
        return MatchResult(Match.ERR, None)
    text = _skip_spaces(text)

    if _char_at(text, 0) != "'":
        return MatchResult(Match.NONE, text)

    pos = 1
    current = _char_at(text, pos)
    if current == "\\":
        pos += 1
        escaped = _char_at(text, pos)
        if not escaped:
            return MatchResult(Match.PARTIAL, text)
        if escaped not in _ESCAPES:
            return MatchResult(Match.ERR, text)
        value = _ESCAPES[escaped]
    else:
        if current == "'":
            return MatchResult(Match.ERR, text)
        if not current:
            return MatchResult(Match.PARTIAL, text)
        value = current
    pos += 1

    closing = _char_at(text, pos)
    if not closing:
        return MatchResult(Match.PARTIAL, text)
    if closing != "'":
        return MatchResult(Match.NONE, text)

    return _full(new_char(value), text, pos + 1)


def match_integer_literal(text: Optional[str]) -> MatchResult:
    """Match a decimal integer literal that fits in a signed 64-bit value."""
    if text is None:
        return MatchResult(Match.ERR, None)
    text = _skip_spaces(text)

    if _char_at(text, 0) not in _DIGITS:
        return MatchResult(Match.NONE, text)

    end = 1
    while _char_at(text, end) in _DIGITS:
        end += 1

    following = _char_at(text, end)
    if following in _LETTERS:
        return MatchResult(Match.NONE, text)
    if not following:
        return MatchResult(Match.PARTIAL, text)

    value = int(text[:end])
    if value > _INT64_MAX:
        _log.error("integer literal %s is out of range", text[:end])
        return MatchResult(Match.NONE, text)

    return _full(new_int(value), text, end)


def match_string_literal(text: Optional[str]) -> MatchResult:
    """Match a double-quoted string literal."""
    if text is None:
        return MatchResult(Match.ERR, None)
    text = _skip_spaces(text)

    if _char_at(text, 0) != '"':
        return MatchResult(Match.NONE, text)

    end = text.find('"', 1)
    if end < 0:
        return MatchResult(Match.PARTIAL, text)

    return _full(new_string(text[1:end]), text, end + 1)


def match_identifier(text: Optional[str]) -> MatchResult:
    """Match an identifier; names longer than 256 characters are truncated."""
    if text is None:
        return MatchResult(Match.NONE, None)
    text = _skip_spaces(text)

    first = _char_at(text, 0)
    if first not in _LETTERS and first != "_":
        return MatchResult(Match.NONE, text)

    end = 1
    while _char_at(text, end) in _WORD:
        end += 1

    if end >= len(text):
        return MatchResult(Match.PARTIAL, text)

    return _full(new_id(text[: min(end, _ID_MAX)]), text, end)


_MATCHERS: tuple[Callable[[Optional[str]], MatchResult], ...] = (
    match_keyword,
    match_assignment_operator,
    match_relational_operator,
    match_logic_operator,
    match_bitwise_operator,
    match_arithmetic_operator,
    match_char_literal,
    match_integer_literal,
    match_string_literal,
    match_identifier,
    match_separator,
)


class Tokenizer:
    """Turns source text, fed in chunks or read from a file, into tokens."""

    def __init__(self) -> None:
        self._tokens: list[Token] = []
        self._partial = ""

    def feed(self, chunk: str) -> None:
        """Tokenize a chunk, carrying over an unfinished token from the last one."""
        text = self._partial + chunk
        self._partial = ""
        self._process(text)

    def _process(self, text: str) -> None:
        while text:
            for matcher in _MATCHERS:
                result = matcher(text)
                rest = result.rest if result.rest is not None else ""
                if result.match is Match.ERR:
                    raise TokenizerError(f'Tokenizer error at "{rest}"')
                if result.match is Match.NONE:
                    text = rest
                    continue
                if result.match is Match.PARTIAL:
                    self._partial = rest[: _PARTIAL_SIZE - 1]
                    return
                if result.token is not None:
                    self._tokens.append(result.token)
                text = rest
                break
            else:
                _log.warning("Unrecognized token starting with '%s'", text[0])
                text = text[1:]

    def tokenize(self, filename: str | os.PathLike[str]) -> None:
        """Tokenize the whole file at ``filename``."""
        path = os.fspath(filename)
        if stat.S_ISDIR(os.stat(path).st_mode):
            raise IsADirectoryError(f"'{path}' is a directory, not a file.")

        with open(path, encoding="utf-8", errors="replace") as source:
            while chunk := source.read(_CHUNK_SIZE):
                self.feed(chunk)

        if self._partial:
            _log.warning('leftover "%s"', self._partial)

    def take_tokens(self) -> list[Token]:
        """Return the tokens found so far and leave the tokenizer with none."""
        tokens, self._tokens = self._tokens, []
        return tokens