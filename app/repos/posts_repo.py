import uuid
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from sqlalchemy import and_, func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.blog_post import BlogPost


@dataclass
class PostFilters:
    status: Optional[str] = None
    cluster_id: Optional[uuid.UUID] = None
    author_id: Optional[uuid.UUID] = None
    search: Optional[str] = None


class PostsRepo:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(
        self, post_id: uuid.UUID, with_relations: bool = False
    ) -> Optional[BlogPost]:
        stmt = select(BlogPost).where(BlogPost.id == post_id)
        if with_relations:
            stmt = stmt.options(
                selectinload(BlogPost.author), selectinload(BlogPost.cluster)
            )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_slug(self, slug: str) -> Optional[BlogPost]:
        result = await self.db.execute(select(BlogPost).where(BlogPost.slug == slug))
        return result.scalar_one_or_none()

    async def list_posts(
        self, filters: PostFilters, limit: int, offset: int
    ) -> List[BlogPost]:
        stmt = (
            select(BlogPost)
            .where(*self._conditions(filters))
            .options(selectinload(BlogPost.author), selectinload(BlogPost.cluster))
            .order_by(BlogPost.updated_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def count_posts(self, filters: PostFilters) -> int:
        stmt = (
            select(func.count())
            .select_from(BlogPost)
            .where(*self._conditions(filters))
        )
        result = await self.db.execute(stmt)
        return int(result.scalar_one())

    async def insert(self, values: Dict[str, Any]) -> BlogPost:
        post = BlogPost(**values)
        self.db.add(post)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise
        await self.db.refresh(post)
        return post

    async def update(self, post_id: uuid.UUID, values: Dict[str, Any]) -> BlogPost:
        stmt = (
            update(BlogPost)
            .where(BlogPost.id == post_id)
            .values(**values)
            .returning(BlogPost)
        )
        result = await self.db.execute(stmt)
        post = result.scalar_one()
        await self.db.commit()
        return post

    @staticmethod
    def _conditions(filters: PostFilters) -> list:
        conditions = []
        if filters.status:
            conditions.append(BlogPost.status == filters.status)
        if filters.cluster_id:
            conditions.append(BlogPost.cluster_topic_id == filters.cluster_id)
        if filters.author_id:
            conditions.append(BlogPost.author_id == filters.author_id)
        if filters.search:
            pattern = f"%{filters.search}%"
            conditions.append(
                or_(
                    BlogPost.title.ilike(pattern),
                    BlogPost.primary_keyword.ilike(pattern),
                    BlogPost.slug.ilike(pattern),
                )
            )
        return [and_(*conditions)] if conditions else []
