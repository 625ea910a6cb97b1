"""
mclex - minic Lexer Command-Line Interface
==========================================

Tokenizes a minic source file and prints the resulting tokens.

Usage Examples
--------------
Debug dump (all tokens as one list):
    $ mclex prog.c
    [Token(INT_KEYWORD), Token(IDENTIFIER, 'main'), ...]

One token per line:
    $ mclex --format lines prog.c
    INT_KEYWORD     Int
    IDENTIFIER      main
    ...

Verbose mode:
    $ mclex -v prog.c
"""

from pathlib import Path

import click

from minic import __version__
from minic.cli.errors import handle_cli_exception
from minic.lexer import lex_file
from minic.tokens import Token


def format_tokens(tokens: list[Token], output_format: str) -> str:
    """Render tokens in one of the --format styles."""
    if output_format == "lines":
        return "\n".join(f"{token.type.name:<15} {token.text}" for token in tokens)
    return repr(tokens)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(["debug", "lines"], case_sensitive=False),
    default="debug",
    show_default=True,
    help="Output style: one debug list, or one token per line",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="mclex")
def main(input_file: Path, output_format: str, verbose: bool) -> None:
    """
    Tokenize a minic source file.

    INPUT_FILE is the source file to tokenize. Tokens are printed to
    standard output; errors go to standard error.

    \b
    Examples:
        mclex prog.c                  # Debug dump of all tokens
        mclex --format lines prog.c   # One token per line
    """
    try:
        if verbose:
            click.echo(f"Tokenizing {input_file}...", err=True)

        tokens = lex_file(input_file)

        if tokens or output_format.lower() == "debug":
            click.echo(format_tokens(tokens, output_format.lower()))

        if verbose:
            click.echo(f"Tokenized: {len(tokens)} tokens", err=True)

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()
