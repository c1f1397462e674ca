import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from app.db.postgres.base import close_db
from app.routers import posts
from app.security import get_api_key
from app.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Blog Content API", description="Create, list and publish blog posts")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Blog content API started")

    try:
        yield
    finally:
        await close_db()
        logger.info("Database engine disposed")


app.router.lifespan_context = lifespan

app.include_router(posts.router, dependencies=[Depends(get_api_key)])


@app.get("/")
async def root():
    return {"message": "Blog Content API is running"}
