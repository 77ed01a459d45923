"""
Derive enum member names from NZFCC display names.

Groups and codes use different rules:

    group_identifier("Professional Services")  -> "ProfessionalServices"
    code_identifier("Cafes and restaurants")   -> "CafesAndRestaurants"
"""

from __future__ import annotations

import keyword
import unicodedata

from nzfcc.core.exceptions import EmptyIdentifierError, InvalidIdentifierError
from nzfcc.schemas.enums import TaxonomyEnum


def group_identifier(display_name: str) -> str:
    """Keep the alphanumeric characters of the name, casing untouched."""
    return "".join(c for c in display_name if c.isalnum())


def code_identifier(display_name: str) -> str:
    """Capitalize each whitespace-separated word, then keep alphanumerics."""
    words = []
    for word in display_name.split():
        first, rest = word[0], word[1:]
        if first.isascii():
            first = first.upper()
        words.append("".join(c for c in first + rest if c.isalnum()))
    return "".join(words)


def validate_identifier(
    identifier: str,
    display_name: str,
    base: type[TaxonomyEnum] = TaxonomyEnum,
) -> str:
    """Check a derived identifier can name a member of an enum built on `base`.

    Raises:
        EmptyIdentifierError: the display name had no alphanumeric characters.
        InvalidIdentifierError: the identifier is not a Python identifier, is
            a keyword, differs from its NFKC form (the name Python source
            gives it), or would shadow an attribute of `base`.
    """
    if not identifier:
        raise EmptyIdentifierError(display_name)
    if not identifier.isidentifier():
        raise InvalidIdentifierError(display_name, identifier, "not a valid Python identifier")
    if keyword.iskeyword(identifier):
        raise InvalidIdentifierError(display_name, identifier, "is a Python keyword")
    normalized = unicodedata.normalize("NFKC", identifier)
    if normalized != identifier:
        raise InvalidIdentifierError(
            display_name, identifier, f"is read as {normalized!r} in Python source"
        )
    if hasattr(base, identifier):
        raise InvalidIdentifierError(
            display_name, identifier, f"shadows {base.__name__}.{identifier}"
        )
    return identifier
