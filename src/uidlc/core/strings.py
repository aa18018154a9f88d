"""
String utility functions for uidlc.

Provides the name transformations generators use for file names,
component identifiers and package names.
"""

from __future__ import annotations

import re

_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]+")


def _words(value: str) -> list[str]:
    spaced = _WORD_BOUNDARY.sub(" ", value)
    return [word for word in _NON_ALNUM.split(spaced) if word]


def camel_case_to_dash_case(value: str) -> str:
    """
    Convert a component name to a dash-cased file name.

    Examples:
        >>> camel_case_to_dash_case("AppHeader")
        'app-header'
        >>> camel_case_to_dash_case("HTMLPage")
        'html-page'
        >>> camel_case_to_dash_case("blog post")
        'blog-post'
    """
    return "-".join(word.lower() for word in _words(value))


def dash_case_to_upper_camel_case(value: str) -> str:
    """
    Convert a dash- or space-separated name to UpperCamelCase.

    Examples:
        >>> dash_case_to_upper_camel_case("about-us")
        'AboutUs'
        >>> dash_case_to_upper_camel_case("home")
        'Home'
    """
    return "".join(word[:1].upper() + word[1:] for word in _words(value))


def slugify(value: str) -> str:
    """
    Turn a project name into a package-manifest friendly slug.

    Examples:
        >>> slugify("My Great Project!")
        'my-great-project'
    """
    return _NON_ALNUM.sub("-", value.lower()).strip("-")
