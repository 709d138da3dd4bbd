"""CLI entry point for api-typegen."""

from pathlib import Path

import click
import requests
import yaml

from api_typegen import config
from api_typegen.casing import kebab_case
from api_typegen.errors import TypegenError
from api_typegen.generator.typescript import render_endpoints
from api_typegen.parser.loader import load_document
from api_typegen.parser.openapi import collect_endpoints

EPILOG = """\b
Example:
  api-typegen http://localhost:3000/api/swagger.json MyService
"""


@click.command(context_settings={"help_option_names": ["-h", "--help"]}, epilog=EPILOG)
@click.argument("document")
@click.argument("domain")
@click.option(
    "-o", "--output-dir",
    default=config.OUTPUT_DIR,
    show_default=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory the generated .ts file is written to.",
)
def main(document: str, domain: str, output_dir: Path):
    """Generate TypeScript endpoint types from an OpenAPI v2/v3 DOCUMENT (URL or file).

    The type alias is named after DOMAIN in PascalCase; the file after DOMAIN in kebab-case.
    """
    click.echo(f"Loading {document}...")
    try:
        doc = load_document(document)
        endpoints = collect_endpoints(doc)
        click.echo(f"Found {len(endpoints)} endpoints.")
        schema = render_endpoints(endpoints, domain)
    except (TypegenError, requests.RequestException, yaml.YAMLError, ValueError, OSError) as e:
        raise click.ClickException(f"could not generate schema: {e}") from e

    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / f"{kebab_case(domain)}.ts"
    output_path.write_text(schema, encoding="utf-8")
    click.echo(f"Generated schema: {output_path}")
