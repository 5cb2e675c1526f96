"""Feature name normalisation.

A raw phrase such as ``"MyHTTPPage"``, ``"forgot-password"`` or
``"reset password"`` is split into word tokens by a small state machine and
rendered in two canonical forms:

* ``snake``: lowercase words joined with ``_``, used for files and folders.
* ``pascal``: capitalised words joined together, used for identifiers.
  Acronym tokens (two or more uppercase ASCII letters) are kept verbatim.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, NamedTuple

from .errors import EmptyNameError

__all__ = [
    "FeatureNames",
    "TokenizerState",
    "WordToken",
    "normalize",
    "to_camel",
    "to_pascal",
    "to_snake",
    "tokenize",
]

LOGGER = logging.getLogger(__name__)

_ACRONYM = re.compile(r"[A-Z]{2,}")
_INVALID_SNAKE = re.compile(r"[^a-z0-9_]")
_MULTIPLE_UNDERSCORES = re.compile(r"_+")


class TokenizerState(str, Enum):
    """States of the word tokenizer."""

    START = "start"
    IN_WORD = "in_word"
    IN_ACRONYM = "in_acronym"
    IN_DIGIT_RUN = "in_digit_run"


def _is_upper(char: str) -> bool:
    return "A" <= char <= "Z"


def _is_lower(char: str) -> bool:
    return "a" <= char <= "z"


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


@dataclass(frozen=True, slots=True)
class WordToken:
    """A single word of a feature name."""

    text: str

    @property
    def is_acronym(self) -> bool:
        return _ACRONYM.fullmatch(self.text) is not None

    def capitalized(self) -> str:
        """Return the token as it appears in the pascal form."""

        if self.is_acronym:
            return self.text
        word = self.text.lower()
        return word[:1].upper() + word[1:]


class _Tokenizer:
    """Single pass splitter over ``[A-Za-z0-9]`` runs.

    Every other character ends the current token. Inside a run a new token
    starts when an uppercase letter follows a lowercase letter or a digit, and
    when a lowercase letter follows two or more uppercase letters, in which case
    the last uppercase letter moves to the new token (``HTTPPage`` becomes
    ``HTTP`` and ``Page``).
    """

    def __init__(self) -> None:
        self.state = TokenizerState.START
        self._buffer: list[str] = []
        self._tokens: list[WordToken] = []

    def feed(self, char: str) -> None:
        if _is_upper(char):
            self._upper(char)
        elif _is_lower(char):
            self._lower(char)
        elif _is_digit(char):
            self._digit(char)
        else:
            self._delimiter()

    def finish(self) -> list[WordToken]:
        self._emit()
        self.state = TokenizerState.START
        return self._tokens

    def _emit(self) -> None:
        if self._buffer:
            self._tokens.append(WordToken("".join(self._buffer)))
            self._buffer = []

    def _upper(self, char: str) -> None:
        if self.state in (TokenizerState.IN_WORD, TokenizerState.IN_DIGIT_RUN):
            self._emit()
        self._buffer.append(char)
        self.state = TokenizerState.IN_ACRONYM

    def _lower(self, char: str) -> None:
        # the buffer only holds uppercase letters while IN_ACRONYM
        if self.state is TokenizerState.IN_ACRONYM and len(self._buffer) > 1:
            head = self._buffer.pop()
            self._emit()
            self._buffer.append(head)
        self._buffer.append(char)
        self.state = TokenizerState.IN_WORD

    def _digit(self, char: str) -> None:
        self._buffer.append(char)
        self.state = TokenizerState.IN_DIGIT_RUN

    def _delimiter(self) -> None:
        self._emit()
        self.state = TokenizerState.START


def tokenize(raw: str) -> list[WordToken]:
    """Split ``raw`` into ordered, non-empty :class:`WordToken` objects."""

    tokenizer = _Tokenizer()
    for char in raw:
        tokenizer.feed(char)
    return tokenizer.finish()


def _as_tokens(value: str | Iterable[WordToken]) -> list[WordToken]:
    if isinstance(value, str):
        return tokenize(value)
    return list(value)


def to_snake(value: str | Iterable[WordToken]) -> str:
    """Return the lowercase, underscore separated form of ``value``.

    ``value`` may be a raw phrase or tokens previously produced by
    :func:`tokenize`.
    """

    candidate = "_".join(token.text.lower() for token in _as_tokens(value))
    candidate = _INVALID_SNAKE.sub("_", candidate)
    candidate = _MULTIPLE_UNDERSCORES.sub("_", candidate)
    return candidate.strip("_")


def to_pascal(value: str | Iterable[WordToken]) -> str:
    """Return the capitalised form of ``value`` with acronyms preserved."""

    return "".join(token.capitalized() for token in _as_tokens(value))


def to_camel(value: str | Iterable[WordToken]) -> str:
    """Return the pascal form of ``value`` with its whole first word lowercased.

    ``HTTPPage`` becomes ``httpPage`` rather than ``hTTPPage``.
    """

    head, *rest = _as_tokens(value) or [WordToken("")]
    return head.text.lower() + "".join(token.capitalized() for token in rest)


class FeatureNames(NamedTuple):
    """The two canonical names derived from a raw phrase."""

    snake: str
    pascal: str


def normalize(raw: str) -> FeatureNames:
    """Derive the snake and pascal names for ``raw``.

    Raises
    ------
    EmptyNameError
        When ``raw`` contains no letters or digits, so no token can be built.
    """

    tokens = tokenize(raw)
    LOGGER.debug("tokenized %r into %s", raw, [token.text for token in tokens])

    snake = to_snake(tokens)
    pascal = to_pascal(tokens)
    if not snake or not pascal:
        raise EmptyNameError(raw)

    if not pascal[0].isalpha():
        LOGGER.warning("'%s' does not start with a letter and is not a valid Dart class name", pascal)

    return FeatureNames(snake=snake, pascal=pascal)
