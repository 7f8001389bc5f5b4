import sys
from typing import BinaryIO, TextIO

import click

from monkeylex.helper import illegal_message
from monkeylex.token import TokenType
from monkeylex.tokenize import Scanner


@click.command()
@click.argument("source", type=click.File("rb"), default="-")
@click.option("-o", "--output", type=click.File("w"), default="-")
@click.option(
    "--extended-identifiers",
    is_flag=True,
    help="Allow digits and underscores inside identifiers.",
)
@click.option("--strict", is_flag=True, help="Exit with status 1 on illegal characters.")
def main(source: BinaryIO, output: TextIO, extended_identifiers: bool, strict: bool):
    scanner = Scanner(source.read(), extended_identifiers)
    illegal = 0
    for token in scanner:
        output.write(f"{token}\n")
        if token.kind == TokenType.Illegal:
            illegal += 1
            click.echo(illegal_message(scanner, token), err=True, nl=False)
    output.flush()
    if strict and illegal:
        sys.exit(1)


if __name__ == "__main__":
    main()
