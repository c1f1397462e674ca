import logging
import uuid
from typing import Any, Dict, Optional, get_args

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from app import dependencies as deps
from app.errors import NotFoundError, PayloadValidationError, PostsError, internal_error
from app.repos.posts_repo import PostFilters
from app.schemas.blog import (
    CreatePostRequest,
    PostDetailResponse,
    PostListResponse,
    PostOut,
    PostResponse,
    PostStatus,
    PublishRequest,
    ReadinessResponse,
)
from app.schemas.validation import parse_payload
from app.services.posts_service import PostsService
from app.services.publish_service import PublishResult, PublishService
from app.settings import settings
from app.utils import isoformat_utc

logger = logging.getLogger(__name__)

router = APIRouter()
POST_STATUSES = get_args(PostStatus)


@router.get("/posts", response_model=PostListResponse)
async def list_posts(
    status: Optional[str] = Query(None),
    cluster_id: Optional[uuid.UUID] = Query(None, alias="clusterId"),
    author_id: Optional[uuid.UUID] = Query(None, alias="authorId"),
    search: Optional[str] = Query(None),
    page: int = Query(1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE),
    service: PostsService = Depends(deps.get_posts_service),
):
    """List posts, newest update first, with optional filters."""
    if status and status not in POST_STATUSES:
        return PayloadValidationError(
            [{"field": "status", "message": f"Must be one of: {', '.join(POST_STATUSES)}"}],
            message="Invalid status filter",
        ).to_response()

    page = max(page, 1)
    limit = min(max(limit, 1), settings.MAX_PAGE_SIZE)
    filters = PostFilters(
        status=status or None,
        cluster_id=cluster_id,
        author_id=author_id,
        search=search or None,
    )
    try:
        return await service.list_posts(filters, page=page, limit=limit)
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        return internal_error("Failed to list posts")


@router.post("/posts", response_model=PostResponse, status_code=201)
async def create_post(
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Create a post; word count and reading time are derived from its content."""
    try:
        raw = await _read_json(request)
        parsed = parse_payload(CreatePostRequest, raw)
        if not parsed.ok:
            raise PayloadValidationError(parsed.errors)
        post = await service.create_post(parsed.value)
        return PostResponse(post=post)
    except PostsError as e:
        return e.to_response()
    except Exception as e:
        logger.error(f"Unexpected error creating post: {e}")
        return internal_error("Failed to create post")


@router.get("/posts/{post_id}", response_model=PostDetailResponse)
async def get_post(
    post_id: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post with its author and cluster."""
    try:
        post = await service.get_post(_parse_post_id(post_id))
        if not post:
            raise NotFoundError("Post not found")
        return PostDetailResponse(post=post)
    except PostsError as e:
        return e.to_response()
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {post_id}: {e}")
        return internal_error("Failed to get post")


@router.post("/posts/{post_id}/publish")
async def publish_post(
    post_id: str,
    request: Request,
    service: PublishService = Depends(deps.get_publish_service),
):
    """
    Publish a post now, or schedule it when ``scheduledFor`` is given.
    The post must pass the readiness check either way.
    """
    try:
        raw = await _read_json(request)
        parsed = parse_payload(PublishRequest, raw)
        if not parsed.ok:
            raise PayloadValidationError(parsed.errors)
        result = await service.publish(_parse_post_id(post_id), parsed.value)
        return JSONResponse(content=_publish_body(result))
    except PostsError as e:
        return e.to_response()
    except Exception as e:
        logger.error(f"Unexpected error publishing post {post_id}: {e}")
        return internal_error("Failed to publish post")


@router.get("/posts/{post_id}/validate", response_model=ReadinessResponse)
async def validate_post(
    post_id: str,
    service: PublishService = Depends(deps.get_publish_service),
):
    """Report whether a post can be published and what blocks it."""
    try:
        readiness = await service.check_readiness(_parse_post_id(post_id))
        return ReadinessResponse(
            publish_ready=readiness.ready, publish_blockers=readiness.blockers
        )
    except PostsError as e:
        return e.to_response()
    except Exception as e:
        logger.error(f"Unexpected error validating post {post_id}: {e}")
        return internal_error("Failed to validate post")


async def _read_json(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        raise PayloadValidationError(
            [{"field": "body", "message": "Request body must be valid JSON"}]
        )


def _parse_post_id(post_id: str) -> uuid.UUID:
    try:
        return uuid.UUID(post_id)
    except ValueError:
        raise NotFoundError("Post not found")


def _publish_body(result: PublishResult) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": True, "status": result.status}
    if result.status == "scheduled":
        body["scheduledFor"] = isoformat_utc(result.timestamp)
    else:
        body["publishedAt"] = isoformat_utc(result.timestamp)
    if result.shopify_article_id:
        body["shopifyArticleId"] = result.shopify_article_id
    body["post"] = PostOut.model_validate(result.post).model_dump(
        mode="json", by_alias=True
    )
    return body
