import logging
from typing import Callable, List, Optional

from hithere.repos.catalog_repo import CatalogRepo
from hithere.schemas.blog import (
    Metadata,
    PostData,
    PostIdentifier,
    PostMetadata,
    RelatedPost,
)
from hithere.services.content_parser import parse_front_matter
from hithere.services.markdown_renderer import render_markdown
from hithere.settings import settings
from hithere.utils import calculate_reading_time

logger = logging.getLogger(__name__)


def default_metadata() -> PostMetadata:
    return PostMetadata(
        title=settings.SITE_TITLE,
        keywords=settings.SITE_DESCRIPTION,
        description=settings.SITE_DESCRIPTION,
    )


class PostsService:
    def __init__(
        self,
        catalog: CatalogRepo,
        repo,
        renderer: Callable[[str], str] = render_markdown,
        fallback: Optional[PostMetadata] = None,
        edit_base_url: Optional[str] = None,
    ):
        self.catalog = catalog
        self.repo = repo
        self.renderer = renderer
        self.fallback = fallback or default_metadata()
        self.edit_base_url = (
            settings.EDIT_BASE_URL if edit_base_url is None else edit_base_url
        )

    def list_identifiers(self) -> List[PostIdentifier]:
        return [
            PostIdentifier(category=category.name, slug=post.slug)
            for category in self.catalog.list_categories()
            for post in category.posts
        ]

    def supported_categories(self) -> List[str]:
        return self.catalog.supported_categories()

    def list_posts(self, category: Optional[str] = None) -> List[Metadata]:
        """Published posts, newest first, optionally limited to one category."""
        categories = self.catalog.list_categories()
        if category:
            categories = [c for c in categories if c.name == category]

        results = []
        for cat in categories:
            for post in cat.posts:
                if not post.isPublished:
                    continue
                front, _body = parse_front_matter(self.repo.load(cat.name, post.slug))
                results.append(
                    Metadata(
                        title=post.title,
                        description=post.description,
                        slug=post.slug,
                        tag=cat.name,
                        authors=front.authors or [],
                        date=front.date,
                    )
                )

        # Plain string order: dates must be zero-padded ISO strings
        results.sort(key=lambda m: m.date or "", reverse=True)
        return results

    def get_post(self, category: str, slug: str) -> PostData:
        """
        Load, parse and render a post, resolving its related posts within the
        same category. Missing files and malformed front matter propagate.
        """
        front, body = parse_front_matter(self.repo.load(category, slug))
        content_html = self.renderer(body)

        relates = []
        for related_slug in front.relates or []:
            related = self.get_post_metadata(category, related_slug)
            if related is self.fallback:
                logger.warning(
                    f"Related post {category}/{related_slug} referenced by "
                    f"{category}/{slug} not found in catalog"
                )
            relates.append(RelatedPost(title=related.title, slug=related_slug))

        return PostData(
            category=category,
            slug=slug,
            title=self._derive_title(front.title, category, slug),
            date=front.date,
            authors=front.authors or [],
            contentHtml=content_html,
            relates=relates,
            readingTime=calculate_reading_time(body),
            editUrl=self._edit_url(category, slug),
        )

    def get_post_metadata(self, category: str, slug: str) -> PostMetadata:
        entry = self.catalog.find_entry(category, slug)
        if not entry:
            return self.fallback
        return PostMetadata(
            title=entry.title,
            keywords=",".join(entry.tags),
            description=entry.description,
        )

    def _derive_title(self, title: Optional[str], category: str, slug: str) -> str:
        if title:
            return title
        entry = self.catalog.find_entry(category, slug)
        if entry:
            return entry.title
        return slug.replace("-", " ").replace("_", " ").title()

    def _edit_url(self, category: str, slug: str) -> Optional[str]:
        if not self.edit_base_url:
            return None
        return f"{self.edit_base_url.rstrip('/')}/{category}/{slug}.md"
