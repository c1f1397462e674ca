import uuid

from sqlalchemy import Column, DateTime, ForeignKey, String, Text, Uuid, func

from app.db.postgres.base import Base


class TopicCluster(Base):
    __tablename__ = "topic_clusters"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(200), nullable=False, unique=True)
    description = Column(Text)
    pillar_post_id = Column(Uuid, index=True)
    parent_id = Column(Uuid, ForeignKey("topic_clusters.id"), index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
