"""Lexical scanner for the JSON dialect read by saffron.

Besides standard JSON this dialect accepts single-quoted strings. Scanning
errors are reported as :class:`ValueError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

_DIGITS = frozenset("0123456789")
_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "\\": "\\", '"': '"', "'": "'"}
_END = "\0"


class TokenKind(Enum):
    """Kinds of token the scanner produces."""

    STRING = "String"
    NUMBER = "Number"
    BOOLEAN = "Boolean"
    LEFT_BRACE = "LeftBrace"
    RIGHT_BRACE = "RightBrace"
    LEFT_BRACKET = "LeftBracket"
    RIGHT_BRACKET = "RightBracket"
    COMMA = "Comma"
    COLON = "Colon"
    NULL = "Null"
    IDENTIFIER = "Identifier"
    END_OF_FILE = "EndOfFile"


_PUNCTUATION = {
    "[": TokenKind.LEFT_BRACKET,
    "]": TokenKind.RIGHT_BRACKET,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ",": TokenKind.COMMA,
    ":": TokenKind.COLON,
}

_KEYWORDS = {
    "true": TokenKind.BOOLEAN,
    "false": TokenKind.BOOLEAN,
    "null": TokenKind.NULL,
}


@dataclass(frozen=True)
class Span:
    """Half-open range of character offsets in the source."""

    start: int
    end: int


@dataclass(frozen=True)
class Token:
    """A scanned token with its position in the source."""

    kind: TokenKind
    lexeme: str
    line: int = 0
    column: int = 0
    span: Span = Span(0, 0)

    @classmethod
    def synthetic(cls, lexeme: str) -> Token:
        """Build an identifier token that does not come from any source."""
        return cls(TokenKind.IDENTIFIER, lexeme, 0, 0, Span(0, 1))

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.lexeme!r}"


_EOF_TOKEN = Token(TokenKind.END_OF_FILE, _END)


class TokenStream:
    """A cursor over a list of tokens that never runs off either end."""

    def __init__(self, tokens: Iterable[Token] = ()) -> None:
        self.tokens = list(tokens)
        self.position = 0

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def previous(self) -> Token:
        """The token just consumed, or the first token before anything is."""
        if not self.tokens:
            return _EOF_TOKEN
        if self.position == 0:
            return self.tokens[0]
        if self.position > len(self.tokens):
            return self.tokens[-1]
        return self.tokens[self.position - 1]

    def current(self) -> Token:
        """The token under the cursor; the last token once past the end."""
        if not self.tokens:
            return _EOF_TOKEN
        if self.position >= len(self.tokens):
            return self.tokens[-1]
        return self.tokens[self.position]

    def advance(self) -> Token:
        """Move past the current token and return it."""
        self.position += 1
        return self.previous()

    def look_ahead(self, k: int) -> Token:
        """The token ``k`` places after the cursor, clamped to the last one."""
        if not self.tokens:
            return _EOF_TOKEN
        if self.position + k >= len(self.tokens):
            return self.tokens[-1]
        return self.tokens[self.position + k]

    def backtrack(self) -> None:
        """Move the cursor back by one token."""
        if self.position == 0:
            raise IndexError("cannot backtrack before the first token")
        self.position -= 1


class Tokenizer:
    """Turns source text into a :class:`TokenStream`."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._line = 1
        self._column = 1
        self._start = 0
        self._length = 0
        self._tokens: list[Token] = []

    def scan_tokens(self) -> TokenStream:
        """Scan the whole source; an end-of-file token closes the stream."""
        while not self._at_end():
            self._scan_token()
        self._emit(TokenKind.END_OF_FILE, _END)
        return TokenStream(self._tokens)

    def _scan_token(self) -> None:
        self._start += self._length
        self._length = 0

        c = self._advance()
        if c == "\n":
            self._column = 1
            self._line += 1
        elif c in (" ", "\t", "\r"):
            pass
        elif c in _PUNCTUATION:
            self._emit(_PUNCTUATION[c], self._lexeme())
        elif c in ('"', "'"):
            self._string(c)
        elif c == "-":
            if self._peek() not in _DIGITS:
                raise self._invalid(c)
            self._number()
        elif c in _DIGITS:
            self._number()
        elif c in _LETTERS:
            self._identifier_or_keyword()
        else:
            raise self._invalid(c)

    def _invalid(self, c: str) -> ValueError:
        return ValueError(f"Invalid character '{c}' at line {self._line}")

    def _number(self) -> None:
        while self._peek() in _DIGITS:
            self._advance()
        if self._peek() == "." and self._peek_next() in _DIGITS:
            self._advance()
            while self._peek() in _DIGITS:
                self._advance()
        self._emit(TokenKind.NUMBER, self._lexeme())

    def _string(self, end: str) -> None:
        chars: list[str] = []
        escaped = False

        while not self._at_end():
            c = self._peek()
            if escaped:
                chars.append(_ESCAPES.get(c, c))
                escaped = False
            elif c == "\\":
                escaped = True
            elif c == end:
                break
            else:
                chars.append(c)

            if c == "\n":
                self._line += 1
                self._column = 0
            else:
                self._column += 1
            self._advance()

        if self._at_end():
            raise ValueError(f"Unterminated string at line {self._line}.")

        self._advance()
        self._emit(TokenKind.STRING, "".join(chars))

    def _identifier_or_keyword(self) -> None:
        while self._peek() in _DIGITS or self._peek() in _LETTERS:
            self._advance()
        lexeme = self._lexeme()
        self._emit(_KEYWORDS.get(lexeme, TokenKind.IDENTIFIER), lexeme)

    def _lexeme(self) -> str:
        return self._source[self._start : self._start + self._length]

    def _emit(self, kind: TokenKind, lexeme: str) -> None:
        span = Span(self._start, self._start + self._length)
        self._tokens.append(Token(kind, lexeme, self._line, self._column, span))

    def _advance(self) -> str:
        if self._at_end():
            return _END
        c = self._source[self._start + self._length]
        self._length += 1
        self._column += 1
        return c

    def _peek(self) -> str:
        index = self._start + self._length
        return self._source[index] if index < len(self._source) else _END

    def _peek_next(self) -> str:
        index = self._start + self._length + 1
        return self._source[index] if index < len(self._source) else _END

    def _at_end(self) -> bool:
        return self._start + self._length >= len(self._source)


def tokenize(source: str) -> TokenStream:
    """Scan ``source`` into a token stream."""
    return Tokenizer(source).scan_tokens()