"""Command-line interface for graphql-transform."""

import json
import logging
import sys

import click

from .core.builder import build_target, collect_template_data
from .core.config import DEFAULT_CONFIG_FILE, load_config
from .core.discovery import discover_schema_files
from .core.errors import ConfigError, RenderError, TransformError


def configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.group()
@click.version_option(package_name="gql-transform")
def main():
    """Transform GraphQL documents into code through templates.

    Queries, mutations and fragments are parsed from GraphQL files and handed
    to a Jinja2 template, which renders the output file.
    """
    pass


@main.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    default=DEFAULT_CONFIG_FILE,
    show_default=True,
    type=click.Path(dir_okay=False),
    help="Path to the JSON build configuration.",
)
@click.option(
    "--keep-going",
    "-k",
    is_flag=True,
    help="Continue with the remaining targets after a failure.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def build(config_path: str, keep_going: bool, verbose: bool):
    """Build every target of the configuration.

    Examples:

        graphql-transform build

        graphql-transform build --config ./web/graphql-transform.json -k
    """
    configure_logging(verbose)
    try:
        config = load_config(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e))

    failed = 0
    for target in config.targets:
        click.echo(f"\nBuilding {target.output} using {target.template}")
        try:
            result = build_target(target, config.base_dir)
        except (TransformError, RenderError, OSError) as e:
            click.echo(f"Error: {e}", err=True)
            failed += 1
            if not keep_going:
                break
            continue

        for schema_file in result.schema_files:
            click.echo(f" > adding: {schema_file}")
        if verbose:
            click.echo(f"  Fragments: {len(result.data.fragments)}")
            click.echo(f"  Queries: {len(result.data.queries)}")
            click.echo(f"  Mutations: {len(result.data.mutations)}")
        click.echo(f"Built in {int(result.elapsed * 1000)}ms\n")

    if failed:
        click.echo(f"{failed} target(s) failed", err=True)
        sys.exit(1)


@main.command()
@click.argument("patterns", nargs=-1, required=True)
@click.option(
    "--base-dir",
    "-d",
    default=".",
    type=click.Path(exists=True, file_okay=False),
    help="Directory the patterns are relative to.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def dump(patterns: tuple, base_dir: str, verbose: bool):
    """Print the template data for GraphQL files as JSON.

    Shows exactly what a template receives.

    Examples:

        graphql-transform dump "queries/**/*.graphql"
    """
    configure_logging(verbose)
    schema_files = discover_schema_files(patterns, base_dir)
    try:
        data = collect_template_data(schema_files)
    except (TransformError, OSError) as e:
        raise click.ClickException(str(e))
    click.echo(json.dumps(data.to_dict(), indent=2))


if __name__ == "__main__":
    main()
