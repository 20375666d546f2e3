"""Identifier case conversion used for generated names."""

from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[_\-\s]+")
_WORD = re.compile(
    r"[A-Z]+(?![a-z])"  # acronyms and single capitals: "HTTP" in "HTTPServer"
    r"|[A-Z][a-z]*"  # capitalised words
    r"|[a-z]+"  # lower-case runs
    r"|[0-9]+"  # digit runs form their own words
    r"|[^A-Za-z0-9]+"  # anything else (e.g. non-ASCII letters) stays together
)


def _words(name: str) -> list[str]:
    """Split an identifier into words on separators and case/digit boundaries."""
    return [
        word
        for chunk in _SEPARATORS.split(name)
        if chunk
        for word in _WORD.findall(chunk)
    ]


def to_pascal_case(name: str) -> str:
    """Convert an identifier such as ``user_id`` to ``UserId``."""
    return "".join(word[:1].upper() + word[1:].lower() for word in _words(name))


def missing_variant_name(field_name: str) -> str:
    """Name of the error variant raised when ``field_name`` is absent."""
    return f"{to_pascal_case(field_name)}Missing"