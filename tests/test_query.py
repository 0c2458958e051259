import pytest

from question_words.query import collect_words_in_questions
from question_words.textutils import collapse_spacing, normalize_spacing
from question_words.tokenization import parse_text

SAMPLE = "я люблю небо і зорі? Ти дивишся фільм. Хто це сказав?"


@pytest.mark.parametrize(
    ("length", "expected"),
    [
        (1, {"я", "і"}),
        (2, {"це"}),
        (3, {"хто"}),
        (4, {"небо", "зорі"}),
        (10, set()),
    ],
)
def test_collect_words_in_questions_on_sample(length: int, expected: set[str]):
    assert collect_words_in_questions(parse_text(SAMPLE), length) == expected


def test_collect_words_deduplicates_case_insensitively():
    text = parse_text("Небо чи НЕБО? небо.")
    assert collect_words_in_questions(text, 4) == {"небо"}


def test_collect_words_is_idempotent_and_leaves_text_alone():
    text = parse_text(SAMPLE)
    first = collect_words_in_questions(text, 3)
    second = collect_words_in_questions(text, 3)
    assert first == second == {"хто"}
    assert text.render() == SAMPLE


def test_collapse_spacing_squeezes_tabs_and_spaces():
    assert collapse_spacing("a \t  b\n\nc") == "a b c"


def test_normalize_spacing_returns_new_text():
    """Normalization drops empty words without touching the original Text."""
    text = parse_text("Is 3.14 ok?")
    normalized = normalize_spacing(text)

    assert normalized is not text
    assert [w.text() for w in text.sentences[0].words] == ["Is", "", "", "ok"]
    assert [w.text() for w in normalized.sentences[0].words] == ["Is", "ok"]
    assert normalized.sentences[0].ends_with_question_mark()
    assert collect_words_in_questions(text, 0) == {""}
    assert collect_words_in_questions(normalized, 0) == set()
