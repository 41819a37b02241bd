"""JavaDoc extraction for enum constants.

The pattern assumes the comment sits directly above the constant with nothing
but whitespace in between; an annotation or a plain `//` comment between the
two hides the description. Swap in another `CommentExtractor` if that stops
holding.
"""

from __future__ import annotations

import re
from typing import Callable

CommentExtractor = Callable[[str], dict[str, str]]

# group 1: comment body, never crossing a `*/`; group 2: enum constant name
JAVADOC_WITH_ENUM_PATTERN = re.compile(
    r"/\*\*((?:(?!\*/).)*?)\*/\s*([A-Z_]+)\(",
    re.DOTALL,
)
# continuation lines only; the first line keeps a leading `*`
_GUTTER = re.compile(r"^\s*\*+ ?")


def _flatten(body: str) -> str:
    first, *rest = body.splitlines() or [""]
    lines = [first.strip(), *(_GUTTER.sub("", line).strip() for line in rest)]
    return " ".join(line for line in lines if line)


def extract_javadoc(source: str) -> dict[str, str]:
    found: dict[str, str] = {}
    for match in JAVADOC_WITH_ENUM_PATTERN.finditer(source):
        found[match.group(2)] = _flatten(match.group(1))
    return found
