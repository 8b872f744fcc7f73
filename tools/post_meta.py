"""
post_meta.py

Validate a post's front matter and derive everything the template and the
posts index need from it: reading time, display date, URLs.
"""

from __future__ import annotations

import datetime
import math
from dataclasses import dataclass
from typing import Mapping, Optional

import slug


REQUIRED_FIELDS = ("title", "date", "category", "excerpt")
WORDS_PER_MINUTE = 200
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


class MetadataError(ValueError):
    pass


class MissingMetadataField(MetadataError):
    def __init__(self, fields: list[str]) -> None:
        self.fields = list(fields)
        super().__init__("missing required front matter: " + ", ".join(self.fields))


class InvalidPostDate(MetadataError):
    pass


def reading_time(text: str, words_per_minute: int = WORDS_PER_MINUTE) -> int:
    """Minutes to read text, rounded up and never less than 1."""
    words = len(text.split())
    return max(1, math.ceil(words / words_per_minute))


def display_date(iso_date: str) -> str:
    """'2025-10-21' -> 'Oct 21, 2025'.

    Parsed as a plain calendar date, so there is no timezone to shift the day.
    """
    day = datetime.date.fromisoformat(iso_date)
    return f"{MONTHS[day.month - 1]} {day.day}, {day.year}"


def _normalize_date(value: object) -> str:
    # YAML loads an unquoted 2025-10-21 as a datetime.date
    if isinstance(value, datetime.datetime):
        value = value.date()
    if isinstance(value, datetime.date):
        return value.isoformat()
    text = str(value).strip()
    try:
        slug.path_date(text)
    except ValueError as exc:
        raise InvalidPostDate(f"date must be YYYY-MM-DD, got {text!r}") from exc
    return text


def validate_metadata(raw: Mapping[str, object]) -> dict[str, object]:
    """Check required fields and return a normalized copy of the metadata."""
    missing = [
        name for name in REQUIRED_FIELDS
        if raw.get(name) is None or not str(raw.get(name)).strip()
    ]
    if missing:
        raise MissingMetadataField(missing)
    metadata = dict(raw)
    metadata["date"] = _normalize_date(raw["date"])
    for name in ("title", "category", "excerpt"):
        metadata[name] = str(raw[name]).strip()
    return metadata


@dataclass(frozen=True)
class PostMeta:
    title: str
    date: str
    category: str
    excerpt: str
    reading_time: int
    display_date: str
    url: str
    thumbnail_url: str
    banner_url: str
    id: Optional[object] = None

    def placeholders(self, html_content: str) -> dict[str, str]:
        return {
            "[POST_TITLE]": self.title,
            "[YYYY-MM-DD]": self.date,
            "[POST_DATE_FORMATTED]": self.display_date,
            "[CATEGORY]": self.category,
            "[EXCERPT]": self.excerpt,
            "[READING_TIME]": str(self.reading_time),
            "[CONVERTED_HTML_CONTENT]": html_content,
            "[POST_URL]": self.url,
            "[BANNER_URL]": self.banner_url,
        }

    def index_record(self) -> dict[str, object]:
        """Entry for posts/all-posts.json."""
        record: dict[str, object] = {}
        if self.id is not None:
            record["id"] = self.id
        record.update(
            date=self.display_date,
            title=self.title,
            excerpt=self.excerpt,
            category=self.category,
            url=self.url,
            thumbnailUrl=self.thumbnail_url,
            bannerUrl=self.banner_url,
            readingTime=self.reading_time,
        )
        return record


def build_post_meta(raw: Mapping[str, object], body: str) -> PostMeta:
    metadata = validate_metadata(raw)
    iso_date = metadata["date"]
    return PostMeta(
        id=metadata.get("id"),
        title=metadata["title"],
        date=iso_date,
        category=metadata["category"],
        excerpt=metadata["excerpt"],
        reading_time=reading_time(body),
        display_date=display_date(iso_date),
        url=slug.post_url(iso_date),
        thumbnail_url=slug.thumbnail_url(iso_date),
        banner_url=slug.banner_url(iso_date),
    )
