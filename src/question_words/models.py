from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator

from .alphabet import DEFAULT_ALPHABET, Alphabet, map_case
from .errors import InvalidCharacter


@dataclass(frozen=True, slots=True)
class Letter:
    """A single character from the accepted alphabet."""

    value: str

    @classmethod
    def create(cls, ch: str, alphabet: Alphabet = DEFAULT_ALPHABET) -> "Letter":
        """Validate ``ch`` against the alphabet and wrap it."""
        if not alphabet.accepts(ch):
            raise InvalidCharacter.for_character(ch)
        return cls(ch)

    def lower(self, alphabet: Alphabet = DEFAULT_ALPHABET) -> "Letter":
        return self._recased(str.lower, alphabet)

    def upper(self, alphabet: Alphabet = DEFAULT_ALPHABET) -> "Letter":
        return self._recased(str.upper, alphabet)

    def _recased(self, mapping: Callable[[str], str], alphabet: Alphabet) -> "Letter":
        mapped = map_case(self.value, mapping)
        if mapped == self.value or not alphabet.accepts(mapped):
            return self
        return Letter(mapped)

    def __str__(self) -> str:
        return self.value


@dataclass(slots=True)
class Word:
    """An ordered run of letters. Its string form is always derived from them."""

    letters: list[Letter] = field(default_factory=list)

    @classmethod
    def from_substring(cls, value: str, alphabet: Alphabet = DEFAULT_ALPHABET) -> "Word":
        """Keep the accepted characters of ``value`` in order, dropping the rest."""
        return cls([Letter(ch) for ch in value if alphabet.accepts(ch)])

    def length(self) -> int:
        return len(self.letters)

    def text(self) -> str:
        return "".join(letter.value for letter in self.letters)

    def to_lower(self) -> None:
        """Lowercase every letter in place."""
        for idx, letter in enumerate(self.letters):
            self.letters[idx] = letter.lower()

    def to_upper(self) -> None:
        """Uppercase every letter in place."""
        for idx, letter in enumerate(self.letters):
            self.letters[idx] = letter.upper()

    def __len__(self) -> int:
        return len(self.letters)

    def __str__(self) -> str:
        return self.text()


@dataclass(slots=True)
class Sentence:
    """Words of one sentence plus the last terminal mark seen while scanning it."""

    words: list[Word] = field(default_factory=list)
    mark: str | None = None

    def ends_with_question_mark(self) -> bool:
        return self.mark == "?"

    def text(self) -> str:
        """Reconstructed form: words joined by single spaces, then the mark."""
        return " ".join(word.text() for word in self.words) + (self.mark or "")

    def word_lengths(self) -> list[int]:
        return [word.length() for word in self.words]

    def __str__(self) -> str:
        return self.text()


@dataclass(frozen=True, slots=True)
class Text:
    """Ordered sentences produced from one raw input string."""

    sentences: tuple[Sentence, ...] = ()

    def questions(self) -> Iterator[Sentence]:
        return (sentence for sentence in self.sentences if sentence.ends_with_question_mark())

    def render(self) -> str:
        """Join every sentence's reconstructed form with single spaces."""
        return " ".join(sentence.text() for sentence in self.sentences).strip()

    def __len__(self) -> int:
        return len(self.sentences)

    def __str__(self) -> str:
        return self.render()
