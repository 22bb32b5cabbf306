"""
Colour helpers for terminal output.
Each helper returns rich markup with the text escaped, so user supplied
values (paths, app names) are never interpreted as markup tags.
"""
from rich.markup import escape


def _styled(style: str, text) -> str:
    return f"[{style}]{escape(str(text))}[/{style}]"


def cyan(text) -> str:
    return _styled("cyan", text)


def green(text) -> str:
    return _styled("green", text)


def red(text) -> str:
    return _styled("red", text)


def yellow(text) -> str:
    return _styled("yellow", text)
