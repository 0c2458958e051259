from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping

import typer
import yaml

from .config import QuestionWordsConfig, load_config
from .console import StreamConsole
from .errors import ErrorKind, Failure, Outcome
from .pipeline import (
    describe_text,
    find_question_words,
    format_failure,
    ordered_words,
    prepare_text,
    render_outcome,
    run_session,
)

LOGGER = logging.getLogger(__name__)

app = typer.Typer(help="Question-word finder CLI.", no_args_is_help=True)


@app.command()
def find(
    length: int | None = typer.Option(
        None,
        "--length",
        "-n",
        help="Word length to collect. Read from stdin when omitted.",
    ),
    text: str | None = typer.Option(None, "--text", "-t", help="Text to analyze."),
    input_path: Path | None = typer.Option(
        None,
        "--input-path",
        exists=True,
        readable=True,
        dir_okay=False,
        file_okay=True,
        help="UTF-8 text file to analyze.",
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Logging level (overrides config log_level)."
    ),
    sort_output: bool | None = typer.Option(
        None, "--sort/--no-sort", help="Print words sorted or in set order."
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Emit the words (or the error) as JSON instead of the report.",
    ),
) -> None:
    """Print the unique lowercase words of a given length found in questions."""
    cfg = _load_cli_config(config)
    if sort_output is not None:
        cfg.sort_output = sort_output
    _configure_logging(log_level or cfg.log_level)
    source = _resolve_text(cfg, text, input_path)
    if source.failure is not None:
        if as_json and length is not None:
            _echo_json({"length": length, **_failure_payload(source.failure)})
        else:
            typer.echo(format_failure(source.failure, cfg))
        return
    raw_text = source.unwrap()

    if length is None:
        # Interactive mode: prompt on stdout, read the length from stdin.
        run_session(StreamConsole(), cfg, raw_text)
        return

    outcome = find_question_words(raw_text, length, cfg)
    if as_json:
        if outcome.failure is not None:
            _echo_json({"length": length, **_failure_payload(outcome.failure)})
        else:
            words = ordered_words(outcome.unwrap(), cfg)
            _echo_json({"length": length, "words": words})
        return
    lines, _ = render_outcome(length, outcome, cfg)
    for line in lines:
        typer.echo(line)


@app.command()
def segment(
    text: str | None = typer.Option(None, "--text", "-t", help="Text to segment."),
    input_path: Path | None = typer.Option(
        None, "--input-path", exists=True, readable=True, dir_okay=False
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Show how the text is split into sentences and words, as JSON."""
    cfg = _load_cli_config(config)
    _configure_logging(cfg.log_level)
    source = _resolve_text(cfg, text, input_path)
    if source.failure is not None:
        _echo_json(_failure_payload(source.failure))
        return
    parsed = prepare_text(source.unwrap(), cfg)
    _echo_json({"sentences": describe_text(parsed)})


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = QuestionWordsConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False, allow_unicode=True))


def main() -> None:
    app()


def _load_cli_config(path: Path | None) -> QuestionWordsConfig:
    """Load the config file, turning read/parse failures into usage errors."""
    try:
        return load_config(path)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _resolve_text(
    config: QuestionWordsConfig, text: str | None, input_path: Path | None
) -> Outcome[str]:
    """Pick the input text: --text, then --input-path, then the configured text."""
    if text is not None:
        return Outcome.success(text)
    if input_path is None:
        return Outcome.success(config.input_text)
    try:
        return Outcome.success(input_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.warning("Cannot read input file %s: %s", input_path, exc)
        return Outcome.fail(ErrorKind.UNEXPECTED, f"Cannot read {input_path}: {exc}")


def _failure_payload(failure: Failure) -> Dict[str, str]:
    return {"error": failure.message, "kind": failure.kind.value}


def _echo_json(payload: Mapping[str, Any]) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


def _configure_logging(level_name: str) -> None:
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(f"Unknown log level: {level_name}")
    # basicConfig logs to stderr, keeping stdout reserved for the report.
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


if __name__ == "__main__":
    main()
