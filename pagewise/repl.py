from typing import List


class ReplSyntaxError(Exception):
    def __init__(self, column, message):
        self.column = column

        super().__init__(f"{message} at column {column}")


def parse_args(line: str) -> List[str]:
    """Split a REPL line into arguments, shell style but minimal.

    Arguments are separated by whitespace; double quotes group words, and
    inside them a backslash escapes either a quote or another backslash.
    """
    parsed = []
    accum = None
    escape = False
    quote_start = None

    for i, char in enumerate(line):
        if quote_start is not None:
            if escape:
                if char not in '\\"':
                    raise ReplSyntaxError(i, f"Cannot escape {char!r}")
                accum += char
                escape = False
            elif char == '\\':
                escape = True
            elif char == '"':
                quote_start = None
            else:
                accum += char
        elif char.isspace():
            if accum is not None:
                parsed.append(accum)
                accum = None
        elif char == '"':
            quote_start = i
            accum = accum or ''
        else:
            accum = (accum or '') + char

    if quote_start is not None:
        raise ReplSyntaxError(quote_start, "Unterminated quote")
    if accum is not None:
        parsed.append(accum)

    return parsed
