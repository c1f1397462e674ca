import datetime
import logging
import uuid
from dataclasses import dataclass
from typing import Optional

from app.errors import BusinessRuleViolation, NotFoundError
from app.schemas.blog import PublishRequest
from app.services.readiness import PublishReadiness, check_publish_ready
from app.services.shopify_publisher import ExternalPublisher, ShopifyPublisher
from app.utils import ensure_utc, isoformat_utc, utcnow

logger = logging.getLogger(__name__)

PUBLISHABLE_STATUSES = ("draft", "reviewing", "scheduled")
EXTERNAL_TARGETS = ("shopify", "both")


@dataclass
class PublishResult:
    status: str
    timestamp: datetime.datetime
    post: object
    shopify_article_id: Optional[str] = None


class PublishService:
    """Moves a post to ``published`` now, or to ``scheduled`` for later."""

    def __init__(
        self,
        repo,
        readiness_check=check_publish_ready,
        external_publisher: Optional[ExternalPublisher] = None,
        clock=utcnow,
    ):
        self.repo = repo
        self.readiness_check = readiness_check
        self.external_publisher = external_publisher or ShopifyPublisher()
        self.clock = clock

    async def check_readiness(self, post_id: uuid.UUID) -> PublishReadiness:
        post = await self._require_post(post_id)
        return self.readiness_check(post)

    async def publish(self, post_id: uuid.UUID, request: PublishRequest) -> PublishResult:
        post = await self._require_post(post_id)

        readiness = self.readiness_check(post)
        if not readiness.ready:
            raise BusinessRuleViolation(
                "Post is not ready to publish", blockers=readiness.blockers
            )

        if post.status not in PUBLISHABLE_STATUSES:
            raise BusinessRuleViolation(
                f"Post cannot be published from status '{post.status}'"
            )

        now = self.clock()
        if request.scheduled_for is not None:
            return await self._schedule(post, ensure_utc(request.scheduled_for), now)
        return await self._publish_now(post, request.publish_to, now)

    async def _require_post(self, post_id: uuid.UUID):
        post = await self.repo.get_by_id(post_id, with_relations=True)
        if not post:
            raise NotFoundError("Post not found")
        return post

    async def _schedule(self, post, scheduled_for, now) -> PublishResult:
        if scheduled_for <= now:
            raise BusinessRuleViolation("Scheduled date must be in the future")

        updated = await self.repo.update(
            post.id,
            {"status": "scheduled", "scheduled_for": scheduled_for, "updated_at": now},
        )
        logger.info(f"Scheduled post {post.id} for {isoformat_utc(scheduled_for)}")
        return PublishResult(status="scheduled", timestamp=scheduled_for, post=updated)

    async def _publish_now(self, post, publish_to, now) -> PublishResult:
        stamp = isoformat_utc(now)
        article = {
            **(post.ld_json_article or {}),
            "datePublished": stamp,
            "dateModified": stamp,
        }
        updated = await self.repo.update(
            post.id,
            {
                "status": "published",
                "published_at": now,
                "scheduled_for": None,
                "ld_json_article": article,
                "updated_at": now,
            },
        )
        logger.info(f"Published post {post.id} at {stamp}")

        shopify_article_id = None
        if publish_to in EXTERNAL_TARGETS:
            shopify_article_id = await self._publish_external(updated)

        return PublishResult(
            status="published",
            timestamp=now,
            post=updated,
            shopify_article_id=shopify_article_id,
        )

    async def _publish_external(self, post) -> Optional[str]:
        try:
            return await self.external_publisher.publish(post)
        except Exception as e:
            logger.warning(f"External publish failed for post {post.id}: {e}")
            return None
