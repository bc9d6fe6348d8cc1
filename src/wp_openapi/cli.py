"""CLI entry point for wp-openapi."""

import json
from pathlib import Path

import click
import yaml
from pydantic import ValidationError

from wp_openapi.generator.document import build_document
from wp_openapi.parser.base import WordPressSchema
from wp_openapi.parser.detect import detect_format
from wp_openapi.parser.wordpress import parse_wordpress


def _load_schema(file_path: Path) -> WordPressSchema:
    """Parse a WordPress index, turning load failures into CLI errors."""
    fmt = detect_format(file_path)
    if fmt != "wordpress":
        raise click.ClickException(f"{file_path} is not a WordPress REST index (detected: {fmt}).")
    try:
        return parse_wordpress(file_path)
    except (ValueError, yaml.YAMLError, ValidationError) as e:
        raise click.ClickException(f"Could not read {file_path}: {e}") from e


def _dump(data: dict, output: Path) -> str:
    if output.suffix.lower() in (".yaml", ".yml"):
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


@click.group()
def main():
    """WP OpenAPI — convert a WordPress REST API index into Swagger 2.0."""
    pass


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file (.json, .yaml or .yml).")
@click.option("--host", default=None, envvar="WP_OPENAPI_HOST", help="API host; defaults to the host of the site URL.")
@click.option("--base-path", default="/wp-json", envvar="WP_OPENAPI_BASE_PATH", show_default=True, help="Swagger basePath.")
@click.option("--scheme", "schemes", multiple=True, type=click.Choice(["http", "https"]), help="Transfer scheme (repeatable).")
@click.option("--namespace", "namespaces", multiple=True, help="Only convert routes in this namespace (repeatable).")
def convert(doc_path: Path, output: Path, host: str | None, base_path: str, schemes: tuple[str, ...], namespaces: tuple[str, ...]):
    """Convert a WordPress index dump into a Swagger document."""
    click.echo(f"Parsing {doc_path}...")
    schema = _load_schema(doc_path)
    click.echo(f"Found {len(schema.routes)} routes.")

    doc = build_document(
        schema,
        host=host,
        base_path=base_path,
        schemes=list(schemes) or None,
        namespaces=list(namespaces) or None,
    )
    operations = sum(len(item) for item in doc.paths.values())
    click.echo(f"Built {len(doc.paths)} paths with {operations} operations.")

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(_dump(doc.to_swagger(), output), encoding="utf-8")
    click.echo(f"Swagger document saved to {output}")


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("--namespace", "namespaces", multiple=True, help="Only list routes in this namespace (repeatable).")
def routes(doc_path: Path, namespaces: tuple[str, ...]):
    """List the converted paths and their parameter counts."""
    schema = _load_schema(doc_path)
    doc = build_document(schema, namespaces=list(namespaces) or None)
    for path, item in doc.paths.items():
        for method, operation in item.items():
            click.echo(f"{method.upper():<7} {path}  ({len(operation.parameters)} params)")
