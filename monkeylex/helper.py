from monkeylex.token import Token
from monkeylex.tokenize import Scanner


def error_message(expression: str, location: int, message: str) -> str:
    line_start = expression.rfind("\n", 0, location) + 1
    line_end = expression.find("\n", location)
    if line_end == -1:
        line_end = len(expression)
    line_number = expression.count("\n", 0, line_start) + 1
    prefix = f"line {line_number}: "
    # tabs stay tabs so the caret lines up with the echoed line
    padding = "".join(
        "\t" if char == "\t" else " " for char in expression[line_start:location]
    )
    messages = [
        f"{prefix}{expression[line_start:line_end]}\n",
        f"{' ' * len(prefix)}{padding}^ {message}\n",
    ]
    return "".join(messages)


def source_text(scanner: Scanner) -> str:
    # one character per byte so token locations index it directly
    return scanner.source.decode("ascii", errors="replace")


def illegal_message(scanner: Scanner, token: Token) -> str:
    return error_message(source_text(scanner), token.location, "illegal character")
