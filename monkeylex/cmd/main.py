import sys
from typing import TextIO

import typer

from monkeylex.helper import illegal_message
from monkeylex.token import TokenType
from monkeylex.tokenize import Scanner

app = typer.Typer()


def run(
    stdin: TextIO,
    prompt: str = "",
    extended_identifiers: bool = False,
    diagnostics: bool = True,
) -> None:
    while True:
        if prompt:
            typer.echo(prompt, nl=False)
        line = stdin.readline()
        if not line:
            break
        scanner = Scanner(line, extended_identifiers)
        while True:
            token = scanner.next_token()
            if token.kind == TokenType.Eof:
                break
            typer.echo(str(token))
            if diagnostics and token.kind == TokenType.Illegal:
                typer.echo(illegal_message(scanner, token), err=True, nl=False)


@app.command()
def main(
    prompt: str = typer.Option("", help="Text written before each line is read."),
    extended_identifiers: bool = typer.Option(
        False, help="Allow digits and underscores inside identifiers."
    ),
    diagnostics: bool = typer.Option(
        True, help="Report illegal characters on stderr."
    ),
):
    run(sys.stdin, prompt, extended_identifiers, diagnostics)


if __name__ == "__main__":
    app()
