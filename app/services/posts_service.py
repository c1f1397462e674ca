import logging
import uuid
from typing import Optional

from pydantic.alias_generators import to_camel
from sqlalchemy.exc import IntegrityError

from app.errors import BusinessRuleViolation
from app.repos.posts_repo import PostFilters
from app.schemas.blog import (
    CreatePostRequest,
    Pagination,
    PostListResponse,
    PostOut,
    PostWithRelations,
)
from app.utils import calculate_reading_time, count_post_words, count_words, utcnow

logger = logging.getLogger(__name__)

# Nested records persisted as JSON documents, keyed the way clients send them
JSON_FIELDS = (
    "sections",
    "faq",
    "internal_links",
    "reviewed_by",
    "experience_evidence",
    "ld_json_article",
)

DEFAULT_PERFORMANCE = {
    "clicks": None,
    "impressions": None,
    "averagePosition": None,
    "ctr": None,
    "conversionEvents": None,
    "lastSyncedAt": None,
}


class PostsService:
    def __init__(self, repo, authors_repo, clock=utcnow):
        self.repo = repo
        self.authors_repo = authors_repo
        self.clock = clock

    async def list_posts(
        self, filters: PostFilters, page: int, limit: int
    ) -> PostListResponse:
        offset = (page - 1) * limit
        total = await self.repo.count_posts(filters)
        posts = await self.repo.list_posts(filters, limit=limit, offset=offset)
        return PostListResponse(
            posts=[PostWithRelations.model_validate(p) for p in posts],
            pagination=Pagination(
                page=page,
                limit=limit,
                total=total,
                has_more=offset + len(posts) < total,
            ),
        )

    async def get_post(self, post_id: uuid.UUID) -> Optional[PostWithRelations]:
        post = await self.repo.get_by_id(post_id, with_relations=True)
        if not post:
            return None
        return PostWithRelations.model_validate(post)

    async def create_post(self, data: CreatePostRequest) -> PostOut:
        """Insert a new post with its derived fields.

        The author must exist and both the slug and any client supplied id
        must be free. Each failure is a BusinessRuleViolation and nothing is
        written, including when a concurrent insert wins the unique constraint.
        """
        author = await self.authors_repo.get_by_id(data.author_id)
        if not author:
            raise BusinessRuleViolation("Author not found")

        if await self.repo.get_by_slug(data.slug):
            raise BusinessRuleViolation("Slug already exists")

        if data.id and await self.repo.get_by_id(data.id):
            raise BusinessRuleViolation("Post id already exists")

        for section in data.sections:
            section.word_count = count_words(section.body)
        word_count = count_post_words(
            data.hero_answer, (section.body for section in data.sections)
        )

        documents = data.model_dump(mode="json", by_alias=True)
        values = data.model_dump(exclude={"id", *JSON_FIELDS})
        values.update({name: documents[to_camel(name)] for name in JSON_FIELDS})

        now = self.clock()
        values.update(
            id=data.id or uuid.uuid4(),
            word_count=word_count,
            reading_time_mins=calculate_reading_time(word_count),
            performance=dict(DEFAULT_PERFORMANCE),
            created_at=now,
            updated_at=now,
        )

        try:
            post = await self.repo.insert(values)
        except IntegrityError as e:
            conflict = await self._conflict(values)
            if conflict is None:
                logger.error(f"Insert of post {values['slug']} failed: {e.orig}")
                raise
            raise conflict from e
        logger.info(f"Created post {post.id} ({post.slug}) with {word_count} words")
        return PostOut.model_validate(post)

    async def _conflict(self, values) -> Optional[BusinessRuleViolation]:
        if await self.repo.get_by_id(values["id"]):
            return BusinessRuleViolation("Post id already exists")
        if await self.repo.get_by_slug(values["slug"]):
            return BusinessRuleViolation("Slug already exists")
        return None
