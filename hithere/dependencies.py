from functools import lru_cache

from fastapi import Depends

from hithere.repos.catalog_repo import CatalogRepo, load_catalog
from hithere.repos.posts_repo import FilePostsRepo
from hithere.services.posts_service import PostsService
from hithere.settings import settings


@lru_cache(maxsize=1)
def get_catalog() -> CatalogRepo:
    """Catalog is loaded once per process and shared read-only."""
    return load_catalog(settings.catalog_path)


def get_posts_repo() -> FilePostsRepo:
    return FilePostsRepo(settings.CONTENT_ROOT)


def get_posts_service(
    catalog=Depends(get_catalog),
    repo=Depends(get_posts_repo),
):
    return PostsService(catalog=catalog, repo=repo)
