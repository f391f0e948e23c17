"""Fragments of tokenized source text and the sequences that hold them."""

import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, overload

from linelimit.constants import (
    COMMENT_PATTERN,
    PUNCTUATION_PATTERN,
    STRING_PATTERN,
    WHITESPACE_PATTERN,
    WORD_PATTERN,
)


class FragmentKind(Enum):
    """Kinds of fragment produced by the tokenizer."""

    COMMENT = "comment"
    STRING = "string"
    WHITESPACE = "whitespace"
    WORD = "word"
    PUNCTUATION = "punctuation"


@dataclass(frozen=True)
class Fragment:
    """An immutable unit of source text."""

    kind: FragmentKind
    content: str

    def __len__(self) -> int:
        return len(self.content)


class FragmentSequence(Protocol):
    """What the scanner needs from a host's token collection."""

    def __len__(self) -> int: ...

    def __getitem__(self, index: int) -> Fragment: ...

    def insert_at(self, index: int, fragments: Sequence[Fragment]) -> None: ...

    def replace_at(self, index: int, fragment: Fragment) -> None: ...


class Tokens:
    """List-backed, mutable sequence of fragments.

    Concatenating the content of every fragment, in order, reproduces the
    text the sequence was built from.
    """

    def __init__(self, fragments: Iterable[Fragment] = ()) -> None:
        self._fragments = list(fragments)

    @classmethod
    def from_text(cls, text: str) -> "Tokens":
        return cls(tokenize(text))

    def __len__(self) -> int:
        return len(self._fragments)

    @overload
    def __getitem__(self, index: int) -> Fragment: ...

    @overload
    def __getitem__(self, index: slice) -> list[Fragment]: ...

    def __getitem__(self, index: int | slice) -> Fragment | list[Fragment]:
        return self._fragments[index]

    def __iter__(self) -> Iterator[Fragment]:
        return iter(self._fragments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tokens):
            return NotImplemented
        return self._fragments == other._fragments

    def __repr__(self) -> str:
        return f"Tokens({self._fragments!r})"

    def _check_index(self, index: int, upper: int) -> None:
        if not 0 <= index <= upper:
            raise IndexError(
                f"fragment index {index} out of range for {len(self)} fragments"
            )

    def insert_at(self, index: int, fragments: Sequence[Fragment]) -> None:
        """Insert fragments so the first one ends up at ``index``."""
        # Inserting at len(self) appends.
        self._check_index(index, len(self))
        self._fragments[index:index] = fragments

    def replace_at(self, index: int, fragment: Fragment) -> None:
        self._check_index(index, len(self) - 1)
        self._fragments[index] = fragment

    def code(self) -> str:
        """Return the text the fragments spell out."""
        return "".join(fragment.content for fragment in self._fragments)


_TOKEN_RE = re.compile(
    "|".join(
        f"(?P<{kind.name}>{pattern})"
        for kind, pattern in (
            (FragmentKind.COMMENT, COMMENT_PATTERN),
            (FragmentKind.STRING, STRING_PATTERN),
            (FragmentKind.WHITESPACE, WHITESPACE_PATTERN),
            (FragmentKind.WORD, WORD_PATTERN),
            (FragmentKind.PUNCTUATION, PUNCTUATION_PATTERN),
        )
    )
)


def tokenize(text: str) -> list[Fragment]:
    """Split text into fragments.

    The lexer is language-agnostic: it recognizes ``#`` and ``//`` line
    comments, ``/* */`` block comments, quoted and triple-quoted strings,
    whitespace runs and words. Anything else becomes a one-character
    punctuation fragment, so no input is ever rejected.
    """
    return [
        Fragment(FragmentKind[match.lastgroup], match.group())
        for match in _TOKEN_RE.finditer(text)
        if match.lastgroup is not None
    ]
