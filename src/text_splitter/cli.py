"""Command-line interface for text-splitter.

Commands:
    - run: Split or extract text from a JSON (or JSON Lines) record list
    - properties: Print the parameter schema as JSON
    - serve-api: Run the optional FastAPI server

Usage:
    $ text-splitter run records.json --split-method sentence
    $ cat records.jsonl | text-splitter run - --jsonl --operation extract --regex "\\d+"
    $ text-splitter properties
"""

from __future__ import annotations

import json
import sys
from importlib.util import find_spec
from pathlib import Path
from typing import Any

import typer

from .config import RuntimeSettings, load_settings
from .logging import configure_logging
from .properties import NODE_DESCRIPTION
from .transform import transform_records

app = typer.Typer(help="Split text into chunks or extract regex matches from JSON records.")


def _handle_error(exc: Exception) -> None:
    """Print ``exc`` to stderr and exit with code 1.

    Raises:
        typer.Exit: Always. ``typer.Exit`` itself is re-raised untouched.
    """
    if isinstance(exc, typer.Exit):
        raise exc
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1) from exc


def _settings(ctx: typer.Context) -> RuntimeSettings:
    if isinstance(ctx.obj, RuntimeSettings):
        return ctx.obj
    return load_settings()


def _read_records(source: str, *, jsonl: bool) -> list[dict[str, Any]]:
    raw = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")

    if jsonl:
        data: Any = [json.loads(line) for line in raw.splitlines() if line.strip()]
    else:
        data = json.loads(raw) if raw.strip() else []

    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise ValueError("Input must be a JSON object or a list of JSON objects")
    return data


def _write_records(records: list[dict[str, Any]], output: Path | None, *, jsonl: bool) -> None:
    if jsonl:
        text = "".join(json.dumps(record, ensure_ascii=False) + "\n" for record in records)
    else:
        text = json.dumps(records, ensure_ascii=False, indent=2) + "\n"

    if output is None:
        typer.echo(text, nl=False)
    else:
        output.write_text(text, encoding="utf-8")


@app.callback()
def main(
    ctx: typer.Context,
    log_level: str | None = typer.Option(
        None, help="Logging level (default from TEXT_SPLITTER_LOG_LEVEL or WARNING)"
    ),
    json_logs: bool | None = typer.Option(
        None, "--json-logs/--console-logs", help="Render logs as JSON lines"
    ),
) -> None:
    settings = load_settings()
    if log_level is not None:
        settings = settings.model_copy(update={"log_level": log_level})
    if json_logs is not None:
        settings = settings.model_copy(update={"json_logs": json_logs})
    configure_logging(settings.log_level, json_format=settings.json_logs)
    ctx.obj = settings


@app.command("run")
def run(
    ctx: typer.Context,
    source: str = typer.Argument("-", help="JSON file with input records, or '-' for stdin"),
    text_field: str | None = typer.Option(None, help="Field holding the text"),
    operation: str | None = typer.Option(None, help="split or extract"),
    split_method: str | None = typer.Option(
        None, help="length, paragraph, sentence, word or regex"
    ),
    regex: str | None = typer.Option(None, help="Pattern to extract"),
    length: int | None = typer.Option(None, help="Characters per chunk"),
    split_regex: str | None = typer.Option(None, help="Pattern to split on"),
    ignore_case: bool | None = typer.Option(
        None, "--ignore-case/--match-case", help="Case-insensitive extraction"
    ),
    all_matches: bool | None = typer.Option(
        None, "--all-matches/--first-match", help="Extract every match or only the first"
    ),
    split_ignore_case: bool | None = typer.Option(
        None, help="Case-insensitive split pattern"
    ),
    on_error: str | None = typer.Option(
        None, help="abort (default) or continue with an error record"
    ),
    regex_timeout: float | None = typer.Option(
        None, help="Seconds allowed per user pattern"
    ),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write results here"),
    jsonl: bool = typer.Option(False, help="Read and write JSON Lines"),
) -> None:
    """Transform records, printing one output record per chunk or match."""
    try:
        settings = _settings(ctx)
        candidates = {
            "textField": text_field,
            "operation": operation,
            "splitMethod": split_method,
            "regex": regex,
            "length": length,
            "splitRegex": split_regex,
            "ignoreCase": ignore_case,
            "globalMatch": all_matches,
            "splitIgnoreCase": split_ignore_case,
        }
        parameters = {name: value for name, value in candidates.items() if value is not None}

        records = _read_records(source, jsonl=jsonl)
        results = transform_records(
            records,
            parameters,
            on_error=on_error or settings.on_error,
            regex_timeout=regex_timeout if regex_timeout is not None else settings.regex_timeout,
        )
        _write_records(results, output, jsonl=jsonl)
    except Exception as exc:
        _handle_error(exc)


@app.command("properties")
def properties() -> None:
    """Print the parameter schema as JSON."""
    typer.echo(json.dumps(NODE_DESCRIPTION.model_dump(), indent=2, ensure_ascii=False))


@app.command("serve-api")
def serve_api(
    ctx: typer.Context,
    host: str = typer.Option("127.0.0.1", help="Bind host"),
    port: int = typer.Option(8000, help="Bind port"),
    max_items: int = typer.Option(10_000, help="Largest accepted record list"),
) -> None:
    """Run the optional FastAPI server (requires the `server` extra)."""
    try:
        missing = [pkg for pkg in ("fastapi", "uvicorn") if find_spec(pkg) is None]
        if missing:
            typer.echo(
                "Server dependencies missing: "
                + ", ".join(missing)
                + "\nInstall with:\n  pip install 'text-splitter[server]'",
                err=True,
            )
            raise typer.Exit(code=2)

        import uvicorn

        from .server.config import ServerRuntimeConfig
        from .server.main import create_app

        settings = _settings(ctx)
        app_obj = create_app(
            config=ServerRuntimeConfig(
                regex_timeout=settings.regex_timeout,
                default_on_error=settings.on_error,
                max_items=max_items,
            )
        )
        uvicorn.run(app_obj, host=host, port=port, log_config=None)
    except Exception as exc:
        _handle_error(exc)


if __name__ == "__main__":
    app()
