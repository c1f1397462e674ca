import uuid

from sqlalchemy import Column, DateTime, String, Text, UniqueConstraint, Uuid, func

from app.db.postgres.base import Base


class Author(Base):
    __tablename__ = "authors"
    __table_args__ = (UniqueConstraint("name", "role", name="authors_name_role_idx"),)

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False)
    role = Column(String(100), nullable=False)
    credentials = Column(String(500), nullable=False)
    profile_url = Column(String(500))
    avatar_url = Column(String(500))
    bio = Column(Text)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
