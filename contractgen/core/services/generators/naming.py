"""
Identifier casing for generated setter names.

Word splitting applies, in order: separators become spaces, ``vN``
version suffixes are split out, camelCase humps are split (only when
the capital is followed by another letter or digit), acronyms are
separated from a following word, and letters after a digit start a
new word.
"""

from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[^A-Za-z0-9]+")
_LOWER_VERSION = re.compile(r"([^a-z]{2,})v([0-9]+)")
_UPPER_VERSION = re.compile(r"([^A-Z]{2,})V([0-9]+)")
_CAMEL_HUMP = re.compile(r"(?<=[a-z])(?=[A-Z][a-zA-Z0-9])")
_ACRONYM_END = re.compile(r"([A-Z]+)([A-Z][a-z])")
_AFTER_DIGIT = re.compile(r"([0-9])([a-zA-Z])")


def split_words(name: str) -> list[str]:
    """Split an identifier into words.

    ``"ForcePathStyle"`` → ``["Force", "Path", "Style"]``,
    ``"UseFIPS"`` → ``["Use", "FIPS"]``,
    ``"DisableS3Express"`` → ``["Disable", "S3", "Express"]``,
    ``"TESTv4"`` → ``["TEST", "v4"]``, ``"EndpointA"`` → ``["EndpointA"]``.
    """
    result = _SEPARATORS.sub(" ", name)
    result = _LOWER_VERSION.sub(r"\1 v\2 ", result)
    result = _UPPER_VERSION.sub(r"\1 V\2 ", result)
    result = " ".join(_CAMEL_HUMP.split(result))
    result = _ACRONYM_END.sub(r"\1 \2", result)
    result = _AFTER_DIGIT.sub(r"\1 \2", result)
    return result.split()


def pascal_case(name: str) -> str:
    """Join words with each word capitalized and acronyms folded."""
    return "".join(word.lower().capitalize() for word in split_words(name))


def lower_camel_case(name: str) -> str:
    """Pascal case with the first character lower-cased.

    >>> lower_camel_case("Foo")
    'foo'
    >>> lower_camel_case("use_dual_stack")
    'useDualStack'
    """
    pascal = pascal_case(name)
    return pascal[:1].lower() + pascal[1:]
