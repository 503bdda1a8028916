"""A small language for typing text with modifier keys.

Plain text is typed key by key; ``{+CTRL}`` / ``{-CTRL}`` and similar tags
press and release modifiers; ``{+UNICODE}`` ... ``{-UNICODE}`` types text as
a whole. ``{{`` and ``}}`` stand for literal braces.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Iterator, Optional, Union

from remotekit.keys import Key, Layout

if TYPE_CHECKING:
    from remotekit.controllable import KeyboardControllable


class ParseError(ValueError):
    """Raised when a DSL string cannot be parsed."""

    description = "Parse error"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.description)


class UnknownTagError(ParseError):
    """A ``{TAG}`` that is not known, e.g. ``{+TEST}``."""

    description = "Unknown tag"

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"{self.description}: {tag}")


class UnexpectedOpenError(ParseError):
    """A ``{`` found inside a tag name, e.g. ``{+HELLO{WORLD}``."""

    description = "Unescaped open bracket ({) found inside tag name"


class UnmatchedOpenError(ParseError):
    """A ``{`` that is never closed."""

    description = "Unmatched open bracket ({). No matching close (})"


class UnmatchedCloseError(ParseError):
    """A ``}`` with no preceding ``{``."""

    description = "Unmatched close bracket (}). No previous open ({)"


class TokenKind(Enum):
    """What a token asks the keyboard to do."""

    SEQUENCE = auto()
    UNICODE = auto()
    KEY_UP = auto()
    KEY_DOWN = auto()


@dataclass(frozen=True)
class Token:
    """One step of a parsed DSL string: text for the sequence kinds, a key otherwise."""

    kind: TokenKind
    value: Union[str, Key]


_TAGS = {
    "+SHIFT": Token(TokenKind.KEY_DOWN, Key.SHIFT),
    "-SHIFT": Token(TokenKind.KEY_UP, Key.SHIFT),
    "+CTRL": Token(TokenKind.KEY_DOWN, Key.CONTROL),
    "-CTRL": Token(TokenKind.KEY_UP, Key.CONTROL),
    "+META": Token(TokenKind.KEY_DOWN, Key.META),
    "-META": Token(TokenKind.KEY_UP, Key.META),
    "+ALT": Token(TokenKind.KEY_DOWN, Key.ALT),
    "-ALT": Token(TokenKind.KEY_UP, Key.ALT),
}


class _Chars:
    """Character iterator with one character of look-ahead."""

    def __init__(self, text: str) -> None:
        self._it = iter(text)
        self._ahead: list[str] = []

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if self._ahead:
            return self._ahead.pop()
        return next(self._it)

    def take(self) -> Optional[str]:
        return next(self, None)

    def peek(self) -> Optional[str]:
        if not self._ahead:
            nxt = next(self._it, None)
            if nxt is None:
                return None
            self._ahead.append(nxt)
        return self._ahead[0]


def _read_tag(chars: _Chars, first: str) -> str:
    tag = [first]
    while True:
        ch = chars.take()
        if ch is None:
            raise UnmatchedOpenError()
        if ch == "{":
            if chars.peek() != "{":
                raise UnexpectedOpenError()
            chars.take()
            tag.append("{")
        elif ch == "}":
            if chars.peek() != "}":
                return "".join(tag)
            chars.take()
            tag.append("}")
        else:
            tag.append(ch)


def tokenize(text: str) -> list[Token]:
    """Split a DSL string into tokens, raising a :class:`ParseError` on bad input."""
    tokens: list[Token] = []
    buffer: list[str] = []
    unicode = False

    def flush() -> None:
        if buffer:
            kind = TokenKind.UNICODE if unicode else TokenKind.SEQUENCE
            tokens.append(Token(kind, "".join(buffer)))
            buffer.clear()

    chars = _Chars(text)
    for ch in chars:
        if ch == "{":
            nxt = chars.take()
            if nxt is None:
                raise UnmatchedOpenError()
            if nxt == "{":
                buffer.append("{")
                continue
            flush()
            tag = _read_tag(chars, nxt)
            if tag == "+UNICODE":
                unicode = True
            elif tag == "-UNICODE":
                unicode = False
            elif tag in _TAGS:
                tokens.append(_TAGS[tag])
            else:
                raise UnknownTagError(tag)
        elif ch == "}":
            if chars.take() != "}":
                raise UnmatchedCloseError()
            buffer.append("}")
        else:
            buffer.append(ch)

    flush()
    return tokens


def evaluate(target: "KeyboardControllable", text: str) -> None:
    """Parse ``text`` completely, then press its keys on ``target``.

    A failing key press (``OSError`` from ``key_down``) is ignored, as the
    remaining keys should still be released.
    """
    for token in tokenize(text):
        if token.kind is TokenKind.SEQUENCE:
            for ch in token.value:
                target.key_click(Layout(ch))
        elif token.kind is TokenKind.UNICODE:
            target.key_sequence(token.value)
        elif token.kind is TokenKind.KEY_UP:
            target.key_up(token.value)
        else:
            try:
                target.key_down(token.value)
            except OSError:
                pass