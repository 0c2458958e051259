from __future__ import annotations

import logging
import re
from enum import Enum
from typing import List

from .alphabet import DEFAULT_ALPHABET, Alphabet, is_terminal_mark, is_word_character
from .models import Sentence, Text, Word

LOGGER = logging.getLogger(__name__)

SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")


class ScanState(Enum):
    IDLE = "idle"
    ACCUMULATING = "accumulating"


class SentenceScanner:
    """Left-to-right scanner that turns one raw sentence into words and a mark.

    Runs of word characters accumulate in a buffer; any other character
    flushes the buffer into a Word. Every terminal mark overwrites the
    previously recorded one, so a mid-sentence ``.`` wins unless a later mark
    follows it.
    """

    def __init__(self, alphabet: Alphabet = DEFAULT_ALPHABET) -> None:
        self.alphabet = alphabet
        self.state = ScanState.IDLE
        self._buffer: List[str] = []
        self._words: List[Word] = []
        self._mark: str | None = None

    def feed(self, ch: str) -> None:
        if is_word_character(ch):
            self._buffer.append(ch)
            self.state = ScanState.ACCUMULATING
            return
        self._flush()
        if is_terminal_mark(ch):
            self._mark = ch

    def finish(self) -> Sentence:
        self._flush()
        sentence = Sentence(words=self._words, mark=self._mark)
        self._words = []
        self._mark = None
        return sentence

    def _flush(self) -> None:
        if self.state is ScanState.ACCUMULATING:
            self._words.append(Word.from_substring("".join(self._buffer), self.alphabet))
            self._buffer.clear()
        self.state = ScanState.IDLE


def parse_sentence(raw: str, alphabet: Alphabet = DEFAULT_ALPHABET) -> Sentence:
    """Scan a raw sentence string into its words and terminal mark."""
    scanner = SentenceScanner(alphabet)
    for ch in raw:
        scanner.feed(ch)
    return scanner.finish()


def split_sentences(raw: str) -> List[str]:
    """Split at terminal marks followed by whitespace; the mark stays attached.

    Trailing empty pieces (text ending in ``". "``) are dropped, but an empty
    input still yields one empty piece.
    """
    pieces = SENTENCE_BOUNDARY.split(raw)
    while len(pieces) > 1 and not pieces[-1]:
        pieces.pop()
    return pieces


def parse_text(raw: str, alphabet: Alphabet = DEFAULT_ALPHABET) -> Text:
    """Segment ``raw`` into sentences and scan each of them."""
    pieces = split_sentences(raw)
    sentences = tuple(parse_sentence(piece, alphabet) for piece in pieces)
    LOGGER.debug(
        "Segmented %d characters into %d sentences (%d questions)",
        len(raw),
        len(sentences),
        sum(1 for sentence in sentences if sentence.ends_with_question_mark()),
    )
    return Text(sentences=sentences)
