import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from hithere.dependencies import get_catalog
from hithere.routers import posts
from hithere.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Hi There API", description="Markdown blog posts")


@asynccontextmanager
async def lifespan(app: FastAPI):
    catalog = get_catalog()
    logger.info(f"Serving categories: {', '.join(catalog.supported_categories())}")
    yield


app.router.lifespan_context = lifespan

app.include_router(posts.router)


@app.get("/")
async def root():
    return {"message": "Hi There API is running"}
