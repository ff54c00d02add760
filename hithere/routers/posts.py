import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from hithere import dependencies as deps
from hithere.repos.posts_repo import PostNotFound
from hithere.schemas.blog import Metadata, PostData, PostIdentifier, PostMetadata
from hithere.services.content_parser import FrontMatterError
from hithere.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/categories", response_model=List[str])
def list_categories(service: PostsService = Depends(deps.get_posts_service)):
    return service.supported_categories()


@router.get("/paths", response_model=List[PostIdentifier])
def list_paths(service: PostsService = Depends(deps.get_posts_service)):
    """Every (category, slug) pair, for static path generation."""
    return service.list_identifiers()


@router.get("/posts", response_model=List[Metadata])
def list_posts(
    category: Optional[str] = None,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get published posts metadata, newest first."""
    try:
        return service.list_posts(category)
    except HTTPException:
        raise
    except (PostNotFound, FrontMatterError) as e:
        logger.error(f"Content error listing posts: {e}")
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{category}/{slug}", response_model=PostData)
def get_post(
    category: str,
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single rendered post with its related posts."""
    try:
        return service.get_post(category, slug)
    except HTTPException:
        raise
    except PostNotFound:
        raise HTTPException(status_code=404, detail="Post not found")
    except FrontMatterError as e:
        logger.warning(f"Bad front matter in {category}/{slug}: {e}")
        raise HTTPException(status_code=404, detail="Post not found")
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {category}/{slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/posts/{category}/{slug}/metadata", response_model=PostMetadata)
def get_post_metadata(
    category: str,
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    return service.get_post_metadata(category, slug)
