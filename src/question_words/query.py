from __future__ import annotations

import logging
from typing import Set

from .models import Text

LOGGER = logging.getLogger(__name__)


def collect_words_in_questions(text: Text, target_length: int) -> Set[str]:
    """Return unique lowercase words of ``target_length`` found in question sentences.

    An empty set means nothing matched. The Text is not modified.
    """
    found: Set[str] = set()
    for sentence in text.questions():
        for word in sentence.words:
            if word.length() == target_length:
                found.add(word.text().lower())
    LOGGER.debug("Collected %d words of length %d", len(found), target_length)
    return found
