import pytest

from question_words.errors import InvalidCharacter
from question_words.models import Letter, Word
from question_words.tokenization import parse_sentence, parse_text, split_sentences

SAMPLE = "я люблю небо і зорі? Ти дивишся фільм. Хто це сказав?"


@pytest.mark.parametrize("ch", ["a", "Z", "я", "Я", "і", "Ї", "є", "Ґ", "ж"])
def test_letter_accepts_alphabet_characters(ch: str):
    assert Letter.create(ch).value == ch


@pytest.mark.parametrize("ch", ["1", "-", "?", " ", "ё", "Ё", "ß", "ab", ""])
def test_letter_rejects_other_characters(ch: str):
    with pytest.raises(InvalidCharacter):
        Letter.create(ch)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("небо", "небо"),
        ("будь-який", "будьякий"),
        ("abc123", "abc"),
        ("Ёлка", "лка"),
        ("2024", ""),
    ],
)
def test_word_keeps_only_accepted_characters(raw: str, expected: str):
    word = Word.from_substring(raw)
    assert word.text() == expected
    assert word.length() == len(expected)
    assert Word.from_substring(word.text()).text() == word.text()


def test_word_case_mapping_replaces_letters_in_place():
    word = Word.from_substring("ҐаНок")
    letters = word.letters
    word.to_lower()
    assert word.text() == "ґанок"
    assert word.letters is letters
    word.to_upper()
    assert str(word) == "ҐАНОК"


def test_parse_sentence_collects_words_and_mark():
    sentence = parse_sentence("я люблю небо і зорі?")
    assert [word.text() for word in sentence.words] == ["я", "люблю", "небо", "і", "зорі"]
    assert sentence.mark == "?"
    assert sentence.ends_with_question_mark()


@pytest.mark.parametrize(
    ("raw", "is_question"),
    [
        ("Хто це сказав?", True),
        ("What?No.", False),
        ("Is it 3.14 really", False),
        ("3.14 is pi?", True),
        ("No punctuation here", False),
        ("Wait! what?", True),
    ],
)
def test_last_terminal_mark_decides_question(raw: str, is_question: bool):
    assert parse_sentence(raw).ends_with_question_mark() is is_question


def test_sentence_without_mark_has_none():
    sentence = parse_sentence("just words")
    assert sentence.mark is None
    assert sentence.text() == "just words"


def test_digit_runs_become_empty_words():
    sentence = parse_sentence("Is 3.14 ok?")
    assert [word.text() for word in sentence.words] == ["Is", "", "", "ok"]
    assert sentence.text() == "Is   ok?"


def test_split_sentences_keeps_marks_attached():
    assert split_sentences(SAMPLE) == [
        "я люблю небо і зорі?",
        "Ти дивишся фільм.",
        "Хто це сказав?",
    ]
    assert split_sentences("One.Two! Three") == ["One.Two!", "Three"]
    assert split_sentences("Done. ") == ["Done."]
    assert split_sentences("") == [""]


def test_parse_text_renders_reconstructed_sentences():
    text = parse_text(SAMPLE)
    assert len(text) == 3
    assert [s.ends_with_question_mark() for s in text.sentences] == [True, False, True]
    assert text.render() == SAMPLE
    assert str(parse_text("Hi,   there!\tBye.")) == "Hi there! Bye."
