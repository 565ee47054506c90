"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
import yaml

from api_doc_tables.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from api_doc_tables.page_rendering import PageRenderingError, load_api_document, write_api_page
from api_doc_tables.schema_flattening import SchemaFlatteningError, flatten_schema


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="api-doc-tables")
@click.option("--verbose", is_flag=True, default=False, help="Log rendering progress to stderr.")
def cli(verbose: bool) -> None:
    """Render HTML API reference tables from OpenAPI schemas."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="render")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the HTML page to write",
)
def render(config_path: str, output_path: str) -> None:
    """Render the configured API document into an HTML reference page."""
    try:
        configuration = load_configuration(config_path)
        document = load_api_document(configuration.api)
        resolved_output = write_api_page(document, configuration.rendering, output_path)
    except (ConfigurationError, PageRenderingError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="flatten-schema")
@click.option(
    "--schema",
    "schema_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to a YAML/JSON schema with references already resolved",
)
@click.option(
    "--anchor-prefix",
    "anchor_prefix",
    required=False,
    default=None,
    help="Prefix for generated object anchors; no anchors when omitted",
)
@click.option(
    "--name",
    "name",
    required=False,
    default=None,
    help="Label used in error messages; defaults to the schema title",
)
def flatten_schema_command(schema_path: str, anchor_prefix: str | None, name: str | None) -> None:
    """Print the object schemas discovered in a schema as JSON."""
    try:
        schema = yaml.safe_load(Path(schema_path).read_text(encoding="utf-8"))
        flattened = flatten_schema(schema, anchor_prefix, name)
    except (yaml.YAMLError, SchemaFlatteningError, OSError) as exc:
        raise CliError(str(exc)) from exc
    objects = [descriptor.as_mapping() for descriptor in flattened.objects]
    click.echo(json.dumps(objects, indent=2, ensure_ascii=False, default=str))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
