"""Coloured terminal output for responses and status messages."""

from __future__ import annotations

import sys
from typing import Any

from termcolor import colored

from saffron.jsonparse import ParseError, parse_json
from saffron.response import HttpResponse


def format_status(code: int) -> str:
    """The status code coloured by class: 2xx green, 3xx yellow, 4xx/5xx red."""
    text = str(code)
    if 200 <= code < 300:
        return colored(text, "green")
    if 300 <= code < 400:
        return colored(text, "yellow")
    if 400 <= code < 500:
        return colored(text, "red")
    if code >= 500:
        return colored(text, "light_red")
    return text


def _format_number(number: float) -> str:
    if isinstance(number, float) and number.is_integer():
        return str(int(number))
    return repr(number) if isinstance(number, float) else str(number)


def format_json(value: Any, indent: int) -> str:
    """Pretty-print a parsed JSON value with colours, two spaces per level."""
    pad = "  " * indent
    if value is None:
        return colored("null", "dark_grey")
    if isinstance(value, bool):
        return colored("true" if value else "false", "yellow")
    if isinstance(value, (int, float)):
        return colored(_format_number(value), "cyan")
    if isinstance(value, str):
        return colored(f'"{value}"', "green")
    if isinstance(value, list):
        if not value:
            return "[]"
        lines = ",\n".join(f"{pad}  {format_json(item, indent + 1)}" for item in value)
        return f"[\n{lines}\n{pad}]"
    if isinstance(value, dict):
        if not value:
            return "{}"
        lines = ",\n".join(
            f"{pad}  {colored(f'\"{key}\"', 'white')}: {format_json(item, indent + 1)}"
            if False
            else f"{pad}  {colored(_quote(key), 'white')}: {format_json(item, indent + 1)}"
            for key, item in value.items()
        )
        return f"{{\n{lines}\n{pad}}}"
    raise TypeError(f"Not a JSON value: {value!r}")


def _quote(text: str) -> str:
    return f'"{text}"'


def print_response(response: HttpResponse, verbose: bool) -> None:
    """Print the status, optionally the headers, and the body of a response."""
    print(f"\n{colored('Status:', attrs=['bold'])} {format_status(response.status)}")

    if verbose:
        print(f"\n{colored('Headers', 'cyan', attrs=['bold'])}:")
        for name, value in response.headers.items():
            print(f"  {colored(name, 'dark_grey')}: {value}")

    print(f"\n{colored('Body', 'cyan', attrs=['bold'])}:")

    text = response.body_as_str()
    if response.is_json():
        if text is None:
            print(colored("<binary data>", "dark_grey"))
        else:
            try:
                value = parse_json(text)
            except ParseError:
                print(text)
            else:
                print(format_json(value, 0))
    elif text is not None:
        print(text)
    else:
        print(colored(f"<binary data, {len(response.body)} bytes>", "dark_grey"))

    print()


def print_error(message: str) -> None:
    print(f"{colored('Error:', 'red', attrs=['bold'])} {message}", file=sys.stderr)


def print_success(message: str) -> None:
    print(f"{colored('✓', 'green', attrs=['bold'])} {message}")


def print_info(message: str) -> None:
    print(f"{colored('ℹ', 'cyan', attrs=['bold'])} {message}")