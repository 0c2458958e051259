"""
question_words package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import QuestionWordsConfig, config_from_dict, config_from_yaml, load_config
from .errors import InputFormatError, InvalidCharacter, UnexpectedError
from .models import Letter, Sentence, Text, Word
from .pipeline import find_question_words, run_session
from .query import collect_words_in_questions
from .textutils import normalize_spacing
from .tokenization import parse_sentence, parse_text

__all__ = [
    "QuestionWordsConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "InputFormatError",
    "InvalidCharacter",
    "UnexpectedError",
    "Letter",
    "Word",
    "Sentence",
    "Text",
    "parse_sentence",
    "parse_text",
    "normalize_spacing",
    "collect_words_in_questions",
    "find_question_words",
    "run_session",
]

__version__ = "0.1.0"
