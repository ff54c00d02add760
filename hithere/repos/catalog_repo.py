import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from pydantic import TypeAdapter, ValidationError

from hithere.schemas.blog import Category, PostEntry

logger = logging.getLogger(__name__)

_categories_adapter = TypeAdapter(List[Category])


class CatalogError(Exception):
    """Raised when the category/post catalog cannot be loaded."""


class CatalogRepo:
    """Read-only view over the category -> post entries mapping."""

    def __init__(self, categories: Iterable[Category]):
        self._categories = tuple(categories)

    def list_categories(self) -> List[Category]:
        return list(self._categories)

    def supported_categories(self) -> List[str]:
        return [category.name for category in self._categories]

    def find_category(self, name: str) -> Optional[Category]:
        return next((c for c in self._categories if c.name == name), None)

    def find_entry(self, category: str, slug: str) -> Optional[PostEntry]:
        found = self.find_category(category)
        if not found:
            return None
        return next((post for post in found.posts if post.slug == slug), None)


def load_catalog(path: Path | str) -> CatalogRepo:
    """Read and validate the JSON catalog at ``path``."""
    try:
        raw = Path(path).read_text(encoding="utf-8")
        categories = _categories_adapter.validate_python(json.loads(raw))
    except (OSError, ValueError, ValidationError) as e:
        raise CatalogError(f"Failed to load catalog {path}: {e}") from e

    logger.info(
        f"Loaded catalog {path}: {len(categories)} categories, "
        f"{sum(len(c.posts) for c in categories)} posts"
    )
    return CatalogRepo(categories)
