"""CLI entry point for openapi-spec-builder."""

import asyncio
from pathlib import Path

import click
import yaml

from openapi_spec_builder.builder import OpenApiSpecBuilder
from openapi_spec_builder.errors import ConformanceError, SpecBuilderError
from openapi_spec_builder.normalizer import METHOD_KEYS


def _load_doc(file_path: Path) -> dict:
    """Load a relaxed document from a YAML or JSON file."""
    try:
        data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise click.ClickException(f"Cannot parse {file_path}: {e}")
    if not isinstance(data, dict):
        raise click.ClickException(f"{file_path} does not contain a mapping at the top level.")
    return data


def _fail(error: SpecBuilderError) -> click.ClickException:
    if isinstance(error, ConformanceError):
        for diagnostic in error.errors:
            click.echo(f"  - {diagnostic}", err=True)
    return click.ClickException(str(error))


@click.group()
def main():
    """OpenAPI Spec Builder: turn relaxed API descriptions into Swagger 2.0 JSON."""
    pass


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output JSON file. Defaults to stdout.")
@click.option("--indent", default=None, type=int, help="Indent the JSON output by this many spaces.")
@click.option("--strict-duplicates", is_flag=True, help="Fail on repeated endpoints, response codes or header names.")
def build(doc_path: Path, output: Path | None, indent: int | None, strict_duplicates: bool):
    """Build a strict Swagger 2.0 document from a relaxed one."""
    builder = OpenApiSpecBuilder(_load_doc(doc_path), strict_duplicates=strict_duplicates)
    try:
        text = asyncio.run(builder.to_json(indent=indent))
    except SpecBuilderError as e:
        raise _fail(e)

    if output is None:
        click.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n", encoding="utf-8")
    click.echo(f"Strict spec saved to {output}", err=True)


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("--strict-duplicates", is_flag=True, help="Fail on repeated endpoints, response codes or header names.")
def check(doc_path: Path, strict_duplicates: bool):
    """Check that a relaxed document builds into a valid Swagger 2.0 document."""
    click.echo(f"Checking {doc_path}...")
    builder = OpenApiSpecBuilder(_load_doc(doc_path), strict_duplicates=strict_duplicates)
    try:
        document = asyncio.run(builder.get_strict_spec())
    except SpecBuilderError as e:
        raise _fail(e)
    operations = sum(1 for item in document["paths"].values() for key in item if key in METHOD_KEYS)
    click.echo(f"OK: {len(document['paths'])} paths, {operations} operations.")
