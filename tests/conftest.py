import json
import textwrap

import pytest

from hithere.repos.catalog_repo import CatalogRepo
from hithere.repos.posts_repo import PostNotFound
from hithere.schemas.blog import Category, PostEntry


def make_catalog(mapping: dict) -> CatalogRepo:
    """
    Build a catalog from {category: [(slug, title, published), ...]}.
    """
    return CatalogRepo(
        Category(
            name=name,
            posts=[
                PostEntry(
                    slug=slug,
                    title=title,
                    description=f"About {title}",
                    tags=[name, slug],
                    isPublished=published,
                )
                for slug, title, published in posts
            ],
        )
        for name, posts in mapping.items()
    )


class FakePostsRepo:
    """
    In-memory stand-in for FilePostsRepo keyed by "category/slug".
    """

    def __init__(self, files: dict[str, str]):
        self.files = files
        self.calls = []

    def load(self, category: str, slug: str) -> str:
        key = f"{category}/{slug}"
        self.calls.append(key)
        if key not in self.files:
            raise PostNotFound(category, slug)
        return textwrap.dedent(self.files[key]).lstrip()


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(
        self,
        list_posts_return=None,
        get_post_return=None,
        metadata_return=None,
        identifiers_return=None,
        categories_return=None,
    ):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self._metadata_return = metadata_return
        self._identifiers_return = identifiers_return or []
        self._categories_return = categories_return or []
        self.list_calls = []

    def list_posts(self, category=None):
        self.list_calls.append(category)
        return self._list_posts_return

    def get_post(self, category: str, slug: str):
        return self._get_post_return

    def get_post_metadata(self, category: str, slug: str):
        return self._metadata_return

    def list_identifiers(self):
        return self._identifiers_return

    def supported_categories(self):
        return self._categories_return


@pytest.fixture
def content_root(tmp_path):
    """
    Writes a small content tree with a config.json catalog.
    """
    catalog = [
        {
            "name": "tech",
            "posts": [
                {
                    "slug": "a",
                    "title": "Post A",
                    "description": "First",
                    "tags": ["python", "web"],
                    "isPublished": True,
                },
                {
                    "slug": "b",
                    "title": "Post B",
                    "description": "Second",
                    "tags": [],
                    "isPublished": False,
                },
            ],
        },
        {"name": "life", "posts": []},
    ]
    (tmp_path / "config.json").write_text(json.dumps(catalog), encoding="utf-8")
    (tmp_path / "tech").mkdir()
    (tmp_path / "tech" / "a.md").write_text(
        "---\ntitle: Post A\ndate: '2024-01-01'\nauthors: [Ada]\nrelates: [b]\n---\n## Intro\n\nHello\n",
        encoding="utf-8",
    )
    (tmp_path / "tech" / "b.md").write_text(
        "---\ntitle: Post B\ndate: '2023-12-31'\n---\nBody B\n", encoding="utf-8"
    )
    return tmp_path
