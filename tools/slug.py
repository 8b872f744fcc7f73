# tools/slug.py
import datetime, re, sys

POSTS_BASE      = "/posts"
THUMBNAILS_BASE = "/assets/images/thumbnails"
BANNERS_BASE    = "/assets/images/banners"
ISO_DATE        = re.compile(r"^\d{4}-\d{2}-\d{2}$")

def path_date(iso_date: str) -> str:
    """'2025-10-21' -> '21-10-2025' (used in URLs and filenames)."""
    if not ISO_DATE.match(iso_date):
        raise ValueError(f"expected a YYYY-MM-DD date, got {iso_date!r}")
    datetime.date.fromisoformat(iso_date)
    return "-".join(reversed(iso_date.split("-")))

def post_url(iso_date: str) -> str:
    return f"{POSTS_BASE}/{path_date(iso_date)}/"

def thumbnail_url(iso_date: str) -> str:
    return f"{THUMBNAILS_BASE}/{path_date(iso_date)}.webp"

def banner_url(iso_date: str) -> str:
    return f"{BANNERS_BASE}/{path_date(iso_date)}.png"

if __name__ == "__main__":
    print(post_url(sys.argv[1]))
