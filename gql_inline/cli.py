"""Command-line interface for gql-inline."""

import logging
from pathlib import Path

import click
from graphql import GraphQLError

from .core.compiler import DEFAULT_COMMAND, RelayCompiler
from .core.config import LANGUAGE_EXTENSIONS, InlineResult, RelayConfig
from .core.errors import InlineError
from .core.grouper import group_definitions
from .core.inliner import inline as inline_text
from .core.splitter import split_definitions


def configure_logging(verbose: bool):
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


verbose_option = click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)

language_option = click.option(
    "--language",
    "-l",
    type=click.Choice(sorted(LANGUAGE_EXTENSIONS)),
    default="javascript",
    show_default=True,
    help="Relay compiler language; selects the source file extension.",
)


@click.group()
@click.version_option()
def main():
    """Inline GraphQL fragments and prepare operations for the relay compiler."""
    pass


@main.command()
@click.argument("operations", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="Write the inlined document to this file instead of stdout.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print a JSON object with 'success' and 'result' or 'error'.",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Fail when a fragment name is defined more than once.",
)
@verbose_option
def inline(operations: str, output: str | None, as_json: bool, strict: bool, verbose: bool):
    """Expand every fragment spread and merge duplicate fields.

    Examples:

        gql-inline inline ./NavigationQuery.graphql

        gql-inline inline ./operations.graphql -o ./inlined.graphql

        gql-inline inline ./operations.graphql --json
    """
    configure_logging(verbose)
    text = Path(operations).read_text()

    try:
        result = inline_text(text, strict=strict)
    except (InlineError, GraphQLError) as e:
        if as_json:
            click.echo(InlineResult(success=False, error=e.message).to_json())
            click.get_current_context().exit(1)
        raise click.ClickException(e.message)

    if as_json:
        result = InlineResult(success=True, result=result).to_json()

    if output:
        output_path = Path(output).resolve()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(result + "\n")
        if verbose:
            click.echo(f"Wrote {output_path}")
    else:
        click.echo(result)


@main.command()
@click.argument("operations", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(file_okay=False),
    help="Directory to write the grouped source files to.",
)
@language_option
@verbose_option
def split(operations: str, output: str, language: str, verbose: bool):
    """Split operations into one source file per component.

    Queries named FooQuery and fragments named Foo_bar both go to Foo.js.

    Examples:

        gql-inline split ./operations.graphql -o ./src

        gql-inline split ./operations.graphql -o ./src --language typescript
    """
    configure_logging(verbose)
    output_path = Path(output).resolve()
    text = Path(operations).read_text()
    extension = RelayConfig(language=language).extension

    try:
        definitions = split_definitions(text)
    except InlineError as e:
        raise click.ClickException(e.message)

    if verbose:
        click.echo(f"Found {len(definitions)} definition(s)")

    files = group_definitions(definitions, extension=extension)
    output_path.mkdir(parents=True, exist_ok=True)
    for merged in files:
        (output_path / merged.filename).write_text(merged.content)
        if verbose:
            click.echo(f"  {merged.filename}")

    click.echo(f"Done! Wrote {len(files)} file(s) to {output_path}")


@main.command("compile")
@click.option(
    "--schema",
    "-s",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Path to the GraphQL schema file.",
)
@click.option(
    "--operations",
    "-p",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a file with queries and fragments.",
)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(file_okay=False),
    help="Directory for the generated artifacts.",
)
@click.option(
    "--command",
    "-c",
    default=DEFAULT_COMMAND,
    show_default=True,
    help="Command line that runs the relay compiler.",
)
@language_option
@verbose_option
def compile_command(schema: str, operations: str, output: str, command: str, language: str, verbose: bool):
    """Run the relay compiler over the given operations.

    Examples:

        gql-inline compile -s ./schema.graphql -p ./operations.graphql -o ./__generated__

        gql-inline compile -s ./schema.graphql -p ./ops.graphql -o ./out -c "pnpx relay-compiler"
    """
    configure_logging(verbose)
    output_path = Path(output).resolve()

    compiler = RelayCompiler(command=command, config=RelayConfig(language=language))

    click.echo("Compiling operations...")
    try:
        result = compiler.compile(
            schema=Path(schema).read_text(),
            operations=Path(operations).read_text(),
        )
    except InlineError as e:
        stderr = getattr(e, "stderr", "")
        if stderr:
            click.echo(stderr, err=True)
        raise click.ClickException(e.message)

    if verbose and result.stdout:
        click.echo(result.stdout)

    output_path.mkdir(parents=True, exist_ok=True)
    for filename, content in result.results.items():
        (output_path / filename).write_text(content)
        if verbose:
            click.echo(f"  {filename}")

    click.echo(f"Done! Generated {len(result.results)} artifact(s) in {output_path}")


if __name__ == "__main__":
    main()
