from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable

ACCEPTED_CHARACTER_CLASS = "а-яА-ЯіІєЄїЇґҐa-zA-Z"
TERMINAL_MARKS = frozenset(".!?")
WORD_JOINER = "-"


@dataclass(frozen=True, slots=True)
class Alphabet:
    """Allow-list of characters that may form a Letter."""

    character_class: str = ACCEPTED_CHARACTER_CLASS
    _pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "_pattern", re.compile(f"[{self.character_class}]")
        )

    def accepts(self, ch: str) -> bool:
        """Return True when ``ch`` is exactly one accepted character."""
        return len(ch) == 1 and self._pattern.fullmatch(ch) is not None


DEFAULT_ALPHABET = Alphabet()


def is_word_character(ch: str) -> bool:
    """Letters, decimal digits and hyphens extend the current word."""
    return ch.isalpha() or ch.isdecimal() or ch == WORD_JOINER


def is_terminal_mark(ch: str) -> bool:
    return ch in TERMINAL_MARKS


def map_case(ch: str, mapping: Callable[[str], str]) -> str:
    # Multi-character expansions (e.g. German sharp s) keep the original.
    mapped = mapping(ch)
    return mapped if len(mapped) == 1 else ch
