from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from string import Formatter
from typing import Any, Mapping, MutableMapping

import yaml

SAMPLE_TEXT = "я люблю небо і зорі? Ти дивишся фільм. Хто це сказав?"


@dataclass(slots=True)
class MessageSettings:
    """Console wording used by the interactive driver."""

    length_prompt: str = "Enter the word length:"
    header: str = "Words of length {length} in question sentences:"
    no_words: str = "No words of the given length were found."
    error: str = "Input or processing error: {message}"


# Placeholders each formatted template may use; the others are printed verbatim.
TEMPLATE_PLACEHOLDERS: dict[str, frozenset[str]] = {
    "header": frozenset({"length"}),
    "error": frozenset({"message"}),
}


@dataclass(slots=True)
class QuestionWordsConfig:
    """Configuration options for the question-word pipeline."""

    input_text: str = SAMPLE_TEXT
    normalize_spacing: bool = True
    preserve_spacing_quirk: bool = False
    sort_output: bool = True
    log_level: str = "WARNING"
    messages: MessageSettings = field(default_factory=MessageSettings)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def check_template(name: str, template: str) -> None:
    """Raise ValueError when ``template`` uses a placeholder it will not receive."""
    allowed = TEMPLATE_PLACEHOLDERS.get(name)
    if allowed is None:
        return
    try:
        parsed = list(Formatter().parse(template))
    except ValueError as exc:
        raise ValueError(f"messages.{name}: malformed template ({exc})") from exc
    for _, placeholder, _, _ in parsed:
        if placeholder is None:
            continue
        if placeholder not in allowed:
            expected = ", ".join("{" + key + "}" for key in sorted(allowed))
            raise ValueError(
                f"messages.{name}: unknown placeholder {{{placeholder}}} "
                f"(allowed: {expected})"
            )


def _check_value(section: str, name: str, value: Any, default: Any) -> Any:
    # Defaults define the expected type; bool is not accepted for str or vice versa.
    expected = type(default)
    if type(value) is not expected:
        raise ValueError(
            f"{section}{name} must be {expected.__name__}, got {type(value).__name__}"
        )
    return value


def _messages_from(data: Any) -> MessageSettings:
    if isinstance(data, MessageSettings):
        values = asdict(data)
    elif isinstance(data, Mapping):
        values = dict(data)
    else:
        raise ValueError("messages must be a mapping of template strings")
    defaults = MessageSettings()
    checked: dict[str, Any] = {}
    for item in fields(MessageSettings):
        if item.name not in values:
            continue
        value = _check_value(
            "messages.", item.name, values[item.name], getattr(defaults, item.name)
        )
        check_template(item.name, value)
        checked[item.name] = value
    return MessageSettings(**checked)


def config_from_dict(data: Mapping[str, Any] | None) -> QuestionWordsConfig:
    """Build a validated QuestionWordsConfig; unknown keys are ignored."""
    if data is None:
        return QuestionWordsConfig()
    defaults = QuestionWordsConfig()
    kwargs: dict[str, Any] = {}
    for item in fields(QuestionWordsConfig):
        if item.name not in data:
            continue
        if item.name == "messages":
            kwargs["messages"] = _messages_from(data["messages"])
            continue
        kwargs[item.name] = _check_value(
            "", item.name, data[item.name], getattr(defaults, item.name)
        )
    level = kwargs.get("log_level")
    if level is not None and not isinstance(logging.getLevelName(level.upper()), int):
        raise ValueError(f"log_level {level!r} is not a logging level name")
    return QuestionWordsConfig(**kwargs)


def config_from_yaml(path: str | Path) -> QuestionWordsConfig:
    """Load configuration from a YAML file."""
    parsed = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> QuestionWordsConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return QuestionWordsConfig()
    return config_from_yaml(path)
