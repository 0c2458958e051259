from __future__ import annotations

import logging
import re
from typing import Any, Dict, Iterable, List, Set, Tuple

from .config import MessageSettings, QuestionWordsConfig
from .console import Console
from .errors import ErrorKind, Failure, InputFormatError, Outcome, QuestionWordsError
from .models import Text
from .query import collect_words_in_questions
from .textutils import normalize_spacing
from .tokenization import parse_text

LOGGER = logging.getLogger(__name__)

INTEGER_TOKEN = re.compile(r"[+-]?\d+")


def parse_word_length(raw: str | None) -> Outcome[int]:
    """Parse the first whitespace-delimited token of ``raw`` as an integer."""
    tokens = raw.split() if raw is not None else []
    if not tokens or INTEGER_TOKEN.fullmatch(tokens[0]) is None:
        LOGGER.warning("Rejected word length input %r", raw)
        return Outcome.from_exception(InputFormatError.for_input(raw))
    return Outcome.success(int(tokens[0]))


def prepare_text(raw_text: str, config: QuestionWordsConfig) -> Text:
    """Segment ``raw_text`` and apply spacing normalization when enabled."""
    text = parse_text(raw_text)
    if not config.normalize_spacing:
        return text
    normalized = normalize_spacing(text)
    if config.preserve_spacing_quirk:
        # Reference behavior: the normalized sentences are built, then dropped.
        LOGGER.debug("Discarding normalized text (preserve_spacing_quirk=True)")
        return text
    return normalized


def find_question_words(
    raw_text: str, target_length: int, config: QuestionWordsConfig
) -> Outcome[Set[str]]:
    """Run segmentation and the question-word query, reporting failures as values."""
    try:
        text = prepare_text(raw_text, config)
        return Outcome.success(collect_words_in_questions(text, target_length))
    except QuestionWordsError as exc:
        LOGGER.warning("Processing failed: %s", exc)
        return Outcome.from_exception(exc)
    except Exception as exc:
        LOGGER.exception("Unexpected failure while processing text")
        return Outcome.fail(ErrorKind.UNEXPECTED, str(exc) or type(exc).__name__)


def ordered_words(words: Iterable[str], config: QuestionWordsConfig) -> List[str]:
    if config.sort_output:
        return sorted(words)
    return list(words)


def format_report(
    target_length: int, words: Set[str], config: QuestionWordsConfig
) -> List[str]:
    """Header line followed by either the no-match line or one word per line."""
    lines = [config.messages.header.format(length=target_length)]
    if not words:
        lines.append(config.messages.no_words)
        return lines
    lines.extend(ordered_words(words, config))
    return lines


def format_failure(failure: Failure, config: QuestionWordsConfig) -> str:
    """Render a failure; a broken error template falls back to the default one."""
    try:
        return config.messages.error.format(message=failure.message)
    except (KeyError, IndexError, ValueError) as exc:
        LOGGER.warning("Invalid error template %r: %s", config.messages.error, exc)
        return MessageSettings().error.format(message=failure.message)


def render_outcome(
    target_length: int, outcome: Outcome[Set[str]], config: QuestionWordsConfig
) -> Tuple[List[str], Outcome[Set[str]]]:
    """Output lines for ``outcome``, plus the outcome after rendering.

    A report template that cannot be formatted turns a success into an
    UNEXPECTED failure instead of raising.
    """
    if outcome.failure is not None:
        return [format_failure(outcome.failure, config)], outcome
    try:
        return format_report(target_length, outcome.unwrap(), config), outcome
    except (KeyError, IndexError, ValueError) as exc:
        LOGGER.warning("Invalid report template: %s", exc)
        failure = Failure(ErrorKind.UNEXPECTED, f"Invalid message template: {exc}")
        return [format_failure(failure, config)], Outcome(failure=failure)


def run_session(
    console: Console, config: QuestionWordsConfig, raw_text: str | None = None
) -> Outcome[Set[str]]:
    """Prompt for a word length, process the text and write the report.

    Failures are written to the console and returned; nothing is raised.
    """
    console.write_line(config.messages.length_prompt)
    length = parse_word_length(console.read_line())
    if length.failure is not None:
        console.write_line(format_failure(length.failure, config))
        return Outcome(failure=length.failure)
    target_length = length.unwrap()

    text = config.input_text if raw_text is None else raw_text
    lines, outcome = render_outcome(
        target_length, find_question_words(text, target_length, config), config
    )
    for line in lines:
        console.write_line(line)
    return outcome


def describe_text(text: Text) -> List[Dict[str, Any]]:
    """JSON-serializable view of each sentence: form, mark and word lengths."""
    return [
        {
            "index": idx,
            "text": sentence.text(),
            "mark": sentence.mark,
            "question": sentence.ends_with_question_mark(),
            "words": [word.text() for word in sentence.words],
            "word_lengths": sentence.word_lengths(),
        }
        for idx, sentence in enumerate(text.sentences)
    ]
