from __future__ import annotations

import re

from .alphabet import DEFAULT_ALPHABET, Alphabet
from .models import Text
from .tokenization import parse_sentence

WHITESPACE_RUN = re.compile(r"[\t\s]+")


def collapse_spacing(value: str) -> str:
    """Replace every run of tabs/whitespace with a single space."""
    return WHITESPACE_RUN.sub(" ", value)


def normalize_spacing(text: Text, alphabet: Alphabet = DEFAULT_ALPHABET) -> Text:
    """Return a new Text whose sentences were re-parsed from collapsed forms.

    The input Text is left untouched.
    """
    return Text(
        sentences=tuple(
            parse_sentence(collapse_spacing(sentence.text()), alphabet)
            for sentence in text.sentences
        )
    )
