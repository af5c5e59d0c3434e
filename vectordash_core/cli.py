"""Command-line interface for vectordash-core."""

import json
import sys
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.table import Table

from vectordash_core import __version__
from vectordash_core.logging_config import get_logger, setup_logging
from vectordash_core.models import DetectionResult
from vectordash_core.query import canonicalize, uses_simplified_dialect
from vectordash_core.schema import (
    build_table_schema,
    detect,
    documents_from_hits,
    truncate_value,
)

console = Console()
logger = get_logger(__name__)


def load_json(path: Path) -> Any:
    """Read a JSON file, exiting with a message when it cannot be parsed."""
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        console.print(f"❌ Invalid JSON in {path}: {e}")
        sys.exit(2)


def is_hit(entry: Any) -> bool:
    return isinstance(entry, dict) and "_source" in entry


def sample_documents(payload: Any) -> list[Any]:
    """
    Extract the document sample from a JSON payload.

    Accepts a list of documents, a list of search hits, or a query response
    with hits under ``responses[0].hits.hits``. A list is read as hits when
    any entry carries ``_source``.
    """
    if isinstance(payload, dict):
        responses = payload.get("responses")
        first = responses[0] if isinstance(responses, list) and responses else None
        hits = first.get("hits") if isinstance(first, dict) else None
        hit_list = hits.get("hits") if isinstance(hits, dict) else None
        return documents_from_hits(hit_list if isinstance(hit_list, list) else [])
    if isinstance(payload, list):
        if any(is_hit(entry) for entry in payload):
            return documents_from_hits(payload)
        return payload
    return []


def render_detection(result: DetectionResult) -> None:
    """Print one table per document kind."""
    for group in result.groups:
        table = Table(title=f"{group.type_name} ({group.doc_count} documents)")
        table.add_column("Field", style="cyan")
        table.add_column("Type")
        table.add_column("Frequency", justify="right")
        table.add_column("Suggested")
        table.add_column("Example", overflow="fold")
        for field in group.fields:
            table.add_row(
                field.name,
                field.inferred_type.value,
                f"{field.frequency:.0%}",
                ", ".join(t.value for t in field.suggested_types) or "-",
                truncate_value(field.example_value, max_len=50),
            )
        console.print(table)


def run_detection(path: Path) -> DetectionResult:
    result = detect(sample_documents(load_json(path)))
    if not result.found_documents:
        console.print(f"⚠️  {result.error}")
        sys.exit(1)
    return result


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Set logging level",
)
def main(log_level: str) -> None:
    """vectordash-core: query canonicalization and schema inference."""
    setup_logging(level=log_level.upper(), enable_file_logging=False)


@main.command(name="canonicalize")
@click.argument("query_file", type=click.Path(exists=True, path_type=Path))
@click.option("--check", is_flag=True, help="Only report the dialect in use")
@click.option("--max-depth", type=int, help="Override the recursion depth ceiling")
def canonicalize_command(query_file: Path, check: bool, max_depth: int | None) -> None:
    """Rewrite an and/or/not query into the canonical dialect."""
    query = load_json(query_file)

    if check:
        dialect = "simplified" if uses_simplified_dialect(query) else "canonical"
        console.print(f"Query uses the {dialect} dialect")
        return

    logger.debug(f"Canonicalizing query from {query_file}")
    print(json.dumps(canonicalize(query, max_depth=max_depth), indent=2))


@main.command(name="detect")
@click.argument("sample_file", type=click.Path(exists=True, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Emit the detection result as JSON")
def detect_command(sample_file: Path, as_json: bool) -> None:
    """Infer fields from a JSON file of sampled documents or search hits."""
    result = run_detection(sample_file)

    if as_json:
        print(json.dumps(result.to_wire(), indent=2, default=str))
        return

    console.print(f"📊 Sampled {result.sample_count} documents")
    render_detection(result)


@main.command(name="schema")
@click.argument("sample_file", type=click.Path(exists=True, path_type=Path))
@click.option("--output", "-o", help="Output file path (JSON)")
def schema_command(sample_file: Path, output: str | None) -> None:
    """Generate a table schema from a document sample."""
    schema = build_table_schema(run_detection(sample_file))

    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(schema, f, indent=2)
        console.print(f"💾 Saved schema to {output_path}")
    else:
        print(json.dumps(schema, indent=2))


if __name__ == "__main__":
    main()
