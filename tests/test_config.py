import re
from pathlib import Path

import pytest

from question_words.config import (
    MessageSettings,
    QuestionWordsConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)


def test_load_config_defaults():
    cfg = load_config(None)
    assert cfg == QuestionWordsConfig()
    assert cfg.input_text.endswith("Хто це сказав?")
    assert cfg.normalize_spacing and not cfg.preserve_spacing_quirk


def test_config_from_dict_ignores_unknown_keys():
    cfg = config_from_dict(
        {"sort_output": False, "unknown": 1, "messages": {"header": "H{length}", "x": 2}}
    )
    assert cfg.sort_output is False
    assert cfg.messages.header == "H{length}"
    assert cfg.messages.no_words == MessageSettings().no_words


def test_config_from_yaml(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "input_text: 'Чому? Бо так.'\npreserve_spacing_quirk: true\n", encoding="utf-8"
    )
    cfg = config_from_yaml(path)
    assert cfg.input_text == "Чому? Бо так."
    assert cfg.preserve_spacing_quirk is True
    assert cfg.to_dict()["messages"]["error"].startswith("Input or processing error")


def test_config_from_yaml_requires_mapping(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("- one\n- two\n", encoding="utf-8")
    with pytest.raises(ValueError):
        config_from_yaml(path)


@pytest.mark.parametrize(
    ("data", "fragment"),
    [
        ({"log_level": 10}, "log_level must be str"),
        ({"log_level": "LOUD"}, "not a logging level"),
        ({"input_text": 123}, "input_text must be str"),
        ({"sort_output": "yes"}, "sort_output must be bool"),
        ({"messages": ["header"]}, "messages must be a mapping"),
        ({"messages": {"no_words": None}}, "messages.no_words must be str"),
        ({"messages": {"header": "Words {len}"}}, "unknown placeholder {len}"),
        ({"messages": {"error": "Error: {}"}}, "unknown placeholder {}"),
        ({"messages": {"header": "Words {length"}}, "malformed template"),
    ],
)
def test_config_from_dict_rejects_invalid_values(data: dict, fragment: str):
    with pytest.raises(ValueError, match=re.escape(fragment)):
        config_from_dict(data)


def test_config_from_dict_accepts_format_spec_and_plain_braces():
    cfg = config_from_dict(
        {"log_level": "debug", "messages": {"header": "[{length:>3}]", "no_words": "{}"}}
    )
    assert cfg.log_level == "debug"
    assert cfg.messages.header.format(length=2) == "[  2]"
