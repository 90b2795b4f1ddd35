"""CLI entrypoints for opmltree."""

from __future__ import annotations

import json
from pathlib import Path

import typer

from opmltree.config import Settings, load_settings
from opmltree.errors import OpmlError
from opmltree.exporter import export
from opmltree.importer import parse
from opmltree.logging import configure_logging, conversion_context, get_logger
from opmltree.models.document import Document
from opmltree.models.outline import OutlineNode
from opmltree.visitor import iter_nodes, visit

app = typer.Typer(add_completion=False, help="Convert between OPML and JSON outline trees")
logger = get_logger(__name__)


def _settings() -> Settings:
    settings = load_settings()
    configure_logging(settings.log_level)
    return settings


def _read(path: Path, settings: Settings) -> str:
    return path.read_text(encoding=settings.encoding)


def _write(text: str, output: Path | None, settings: Settings) -> None:
    if output is None:
        typer.echo(text, nl=False)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding=settings.encoding)
    logger.info("Wrote %s", output)


def _fail(e: Exception) -> typer.Exit:
    logger.error("%s", e)
    return typer.Exit(code=1)


@app.command("to-json")
def to_json(
    input_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="OPML file"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output JSON file (default: stdout)"),
) -> None:
    """Parse an OPML file and write its outline tree as JSON."""

    settings = _settings()
    with conversion_context(source=str(input_path)):
        try:
            document = parse(_read(input_path, settings))
        except OpmlError as e:
            raise _fail(e) from e
        text = json.dumps(document.to_mapping(), ensure_ascii=False, indent=settings.json_indent or None)
        _write(text + "\n", output, settings)


@app.command("to-opml")
def to_opml(
    input_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON outline file"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output OPML file (default: stdout)"),
) -> None:
    """Read a JSON outline tree and write it as OPML."""

    settings = _settings()
    with conversion_context(source=str(input_path)):
        try:
            data = json.loads(_read(input_path, settings))
        except json.JSONDecodeError as e:
            raise _fail(e) from e
        try:
            document = Document.from_mapping(data)
        except OpmlError as e:
            raise _fail(e) from e
        _write(export(document), output, settings)


@app.command()
def roundtrip(
    input_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="OPML file"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output OPML file (default: stdout)"),
) -> None:
    """Parse an OPML file and re-export it in normalized form."""

    settings = _settings()
    with conversion_context(source=str(input_path)):
        try:
            document = parse(_read(input_path, settings))
        except OpmlError as e:
            raise _fail(e) from e
        _write(export(document), output, settings)


@app.command()
def stats(
    input_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="OPML file"),
) -> None:
    """Print node, leaf and depth counts for an OPML file."""

    settings = _settings()
    with conversion_context(source=str(input_path)):
        try:
            document = parse(_read(input_path, settings))
        except OpmlError as e:
            raise _fail(e) from e

    counts = {"nodes": 0, "leaves": 0}

    def count(node: OutlineNode) -> bool:
        counts["nodes"] += 1
        if not node.children:
            counts["leaves"] += 1
        return True

    visit(document.outlines, count)
    max_depth = max((depth + 1 for _node, depth in iter_nodes(document.outlines)), default=0)

    typer.echo(f"nodes: {counts['nodes']}")
    typer.echo(f"leaves: {counts['leaves']}")
    typer.echo(f"depth: {max_depth}")


if __name__ == "__main__":
    app()
