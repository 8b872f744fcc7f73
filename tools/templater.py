"""
templater.py

Fill the post template: every placeholder token (e.g. [POST_TITLE]) is
replaced in a single scan of the template. Every token is matched as
literal text (re.escape), and replaced text is never scanned again, so a
value that mentions a token (a post about the template, say) stays as
written and the order of the keys cannot change the result.

Tokens must not overlap each other; check_placeholders() enforces that.
"""

from __future__ import annotations

import re
from typing import Mapping


PLACEHOLDERS = (
    "[POST_TITLE]",
    "[YYYY-MM-DD]",
    "[POST_DATE_FORMATTED]",
    "[CATEGORY]",
    "[EXCERPT]",
    "[READING_TIME]",
    "[CONVERTED_HTML_CONTENT]",
    "[POST_URL]",
    "[BANNER_URL]",
)

# default banner filename, filled from banner_date
BANNER_FILENAME_PATTERN = "Blog-[YYYY-MM-DD].png"

LEFTOVER_TOKEN = re.compile(r"\[[A-Z][A-Z0-9_-]*\]")


class PlaceholderCollision(ValueError):
    """One placeholder token shows up inside another."""


def check_placeholders(values: Mapping[str, object]) -> None:
    for token in values:
        for other in values:
            if other != token and token in other:
                raise PlaceholderCollision(f"{token} overlaps placeholder {other}")


def fill(template: str, values: Mapping[str, object], *, banner_date: str | None = None) -> str:
    """Return template with every occurrence of every key replaced.

    Keys missing from the template are ignored, and bracketed text that is
    not a key is left alone. When banner_date is given, the default banner
    filename pattern is filled in as well.
    """
    check_placeholders(values)
    replacements = {token: str(value) for token, value in values.items()}
    if banner_date is not None:
        replacements[BANNER_FILENAME_PATTERN] = f"Blog-{banner_date}.png"
    if not replacements:
        return template
    # longest first, so the banner pattern wins over [YYYY-MM-DD]
    pattern = re.compile("|".join(
        re.escape(token) for token in sorted(replacements, key=len, reverse=True)
    ))
    return pattern.sub(lambda m: replacements[m.group(0)], template)


def unresolved_placeholders(document: str) -> list[str]:
    """Bracketed upper-case tokens still present after filling."""
    return sorted(set(LEFTOVER_TOKEN.findall(document)))
