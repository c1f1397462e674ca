import uuid
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.author import Author


class AuthorsRepo:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, author_id: uuid.UUID) -> Optional[Author]:
        return await self.db.get(Author, author_id)
