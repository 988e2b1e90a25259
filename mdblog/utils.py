import datetime
import re

_UNSAFE_SLUG_CHARS = re.compile(r"[^a-z0-9-]")
_HYPHEN_RUNS = re.compile(r"-+")

# Leaves room for the ".md" suffix under the common 255-byte name limit
MAX_SLUG_LENGTH = 200


def normalize_slug(slug: str) -> str:
    """Lower-case, replace anything outside [a-z0-9-] with '-', collapse runs.

    "My First Post!" -> "my-first-post"
    """
    safe = _UNSAFE_SLUG_CHARS.sub("-", slug.lower())
    return _HYPHEN_RUNS.sub("-", safe).strip("-")


def today_iso() -> str:
    return datetime.datetime.now(datetime.timezone.utc).date().isoformat()


def date_sort_key(value: str) -> datetime.datetime:
    """Parse a post date for ordering; unparseable values sort as oldest."""
    try:
        parsed = datetime.datetime.fromisoformat(value.strip())
    except (AttributeError, ValueError):
        return datetime.datetime.min
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(datetime.timezone.utc).replace(tzinfo=None)
    return parsed
