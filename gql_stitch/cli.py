"""Command-line interface for gql-stitch."""

from pathlib import Path

import click
from graphql import GraphQLError

from .core.config import GeneratorConfig
from .core.errors import StitchError
from .core.parser import DocumentParser
from .core.preset import NearOperationFilePreset
from .core.schema import load_schema
from .core.writer import PreambleWriter

# Document syntax errors surface from graphql-core unchanged
INPUT_ERRORS = (StitchError, GraphQLError)


def parse_headers(values: tuple[str, ...]) -> dict[str, str]:
    """Parse repeated ``Name: value`` options into a header dict."""
    headers = {}
    for value in values:
        name, sep, header_value = value.partition(":")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected 'Name: value', got {value!r}", param_hint="--header")
        headers[name.strip()] = header_value.strip()
    return headers


def load_preset(
    schema: str,
    documents: str,
    config_path: str | None,
    headers: tuple[str, ...],
    base_output_dir: str,
    verbose: bool,
) -> NearOperationFilePreset:
    """Load inputs and build the preset, reporting progress."""
    config = GeneratorConfig.from_file(config_path) if config_path else GeneratorConfig()

    if verbose:
        click.echo(f"Schema: {schema}")
        click.echo(f"Documents: {Path(documents).resolve()}")

    click.echo("Loading schema...")
    graphql_schema = load_schema(schema, headers=parse_headers(headers))

    click.echo("Parsing documents...")
    records = DocumentParser(documents).parse_all()

    preset = NearOperationFilePreset(graphql_schema, records, config, base_output_dir)
    if verbose:
        click.echo(f"  Documents: {len(records)}")
        click.echo(f"  Fragments: {len(preset.registry)}")
    return preset


def common_options(func):
    """Options shared by every command."""
    options = [
        click.option(
            "--schema",
            "-s",
            required=True,
            help="Schema file, directory, archive (.zip, .tar.gz, .tgz) or http(s) URL.",
        ),
        click.option(
            "--documents",
            "-d",
            required=True,
            type=click.Path(exists=True),
            help="GraphQL document file or directory (.graphql, .gql).",
        ),
        click.option(
            "--config",
            "-c",
            "config_path",
            type=click.Path(exists=True, dir_okay=False),
            help="JSON generator configuration.",
        ),
        click.option(
            "--header",
            "-H",
            "headers",
            multiple=True,
            help="HTTP header for schema introspection, as 'Name: value'. Repeatable.",
        ),
        click.option("--verbose", "-v", is_flag=True, help="Enable verbose output."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group()
@click.version_option(package_name="gql-stitch")
def main():
    """Fragment import stitching for GraphQL code generation.

    Registers every fragment of a document set and plans the cross-file
    imports each generated file needs.
    """
    pass


@main.command()
@common_options
def registry(schema, documents, config_path, headers, verbose):
    """List every registered fragment and the symbols it exports.

    Example:

        gql-stitch registry -s ./schema.graphqls -d ./src
    """
    try:
        preset = load_preset(schema, documents, config_path, headers, "", verbose)
    except INPUT_ERRORS as e:
        raise click.ClickException(str(e)) from e

    for name, entry in preset.registry.items():
        click.echo(f"{name} on {entry.on_type} -> {entry.file_path}: {', '.join(entry.import_names)}")


@main.command()
@common_options
@click.option(
    "--output",
    "-o",
    default="",
    help="Base output directory generated paths are relative to.",
)
def plan(schema, documents, config_path, headers, verbose, output):
    """Show the external fragments and imports of every output file.

    Example:

        gql-stitch plan -s ./schema.graphqls -d ./src -c codegen.json
    """
    try:
        preset = load_preset(schema, documents, config_path, headers, output, verbose)
        outputs = preset.build_output_files()
    except INPUT_ERRORS as e:
        raise click.ClickException(str(e)) from e

    for output_file in outputs:
        click.echo(output_file.filename)
        for fragment in output_file.external_fragments:
            click.echo(f"  fragment {fragment.name} on {fragment.on_type} (depth {fragment.depth})")
        for statement in output_file.import_statements:
            click.echo(f"  {statement}")


@main.command()
@common_options
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(file_okay=False),
    help="Output directory for generated files.",
)
@click.option(
    "--template-dir",
    type=click.Path(exists=True, file_okay=False),
    help="Directory with templates overriding the built-in ones.",
)
def generate(schema, documents, config_path, headers, verbose, output, template_dir):
    """Write an import preamble module for every output file.

    Example:

        gql-stitch generate -s ./schema -d ./src -o ./generated
    """
    output_path = Path(output).resolve()
    try:
        preset = load_preset(schema, documents, config_path, headers, "", verbose)
        outputs = preset.build_output_files()
    except INPUT_ERRORS as e:
        raise click.ClickException(str(e)) from e

    click.echo("Writing files...")
    writer = PreambleWriter(str(output_path), template_dir=template_dir)
    try:
        written_files = writer.write_all(outputs)
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    if verbose:
        for written in written_files:
            click.echo(f"  {written}")

    click.echo(f"Done! Generated {len(outputs)} files in {output_path}")


if __name__ == "__main__":
    main()
