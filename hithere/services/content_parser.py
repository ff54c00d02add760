import datetime
from typing import List, Optional, Tuple

import frontmatter
import yaml

from hithere.schemas.blog import FrontMatter


class FrontMatterError(ValueError):
    """Raised when the leading metadata block is not valid YAML."""


def parse_front_matter(raw: str) -> Tuple[FrontMatter, str]:
    """Split ``raw`` into its front matter and Markdown body."""
    try:
        parsed = frontmatter.loads(raw)
    except yaml.YAMLError as e:
        raise FrontMatterError(f"Malformed front matter: {e}") from e

    metadata = parsed.metadata or {}
    title = metadata.get("title")
    date = _convert_date(metadata.get("date"))

    front = FrontMatter(
        title=str(title) if title is not None else None,
        date=str(date) if date is not None else None,
        authors=_normalize_list(metadata.get("authors")),
        relates=_normalize_list(metadata.get("relates")),
    )
    return front, parsed.content


def _normalize_list(value) -> Optional[List[str]]:
    if value is None:
        return None
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple, set)):
        return [str(item) for item in value if item is not None]
    return [str(value)]


def _convert_date(value):
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    return value
