import uuid

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    Uuid,
    func,
)
from sqlalchemy.orm import relationship

from app.db.postgres.base import Base
from app.models.author import Author
from app.models.topic_cluster import TopicCluster
from app.models.types import JSONType


class BlogPost(Base):
    __tablename__ = "blog_posts"

    # Identification
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    slug = Column(String(100), nullable=False, unique=True)
    source_url = Column(String(500), index=True)
    source = Column(String(20), nullable=False, default="manual")
    status = Column(String(20), nullable=False, default="draft", index=True)
    version = Column(Integer, nullable=False, default=1)

    # Core content
    title = Column(String(200), nullable=False)
    summary = Column(String(500), nullable=False)
    hero_answer = Column(Text, nullable=False)
    sections = Column(JSONType, nullable=False, default=list)
    faq = Column(JSONType, nullable=False, default=list)

    # SEO
    primary_keyword = Column(String(100), nullable=False)
    secondary_keywords = Column(JSONType, nullable=False, default=list)
    search_intent = Column(String(20), nullable=False, default="informational")
    meta_title = Column(String(100), nullable=False)
    meta_description = Column(String(200), nullable=False)
    canonical_url = Column(String(500), nullable=False)
    focus_questions = Column(JSONType, nullable=False, default=list)
    internal_links = Column(JSONType, nullable=False, default=list)

    # E-E-A-T
    author_id = Column(Uuid, ForeignKey("authors.id"), nullable=False, index=True)
    reviewed_by = Column(JSONType)
    experience_evidence = Column(JSONType, nullable=False)

    # Structured data
    ld_json_article = Column(JSONType, nullable=False)
    ld_json_faq_page = Column(JSONType)

    # Clustering
    cluster_topic_id = Column(Uuid, ForeignKey("topic_clusters.id"), index=True)
    parent_post_id = Column(Uuid, ForeignKey("blog_posts.id"))

    # Content metadata
    raw_html = Column(Text)
    word_count = Column(Integer, nullable=False, default=0)
    reading_time_mins = Column(Integer, nullable=False, default=0)
    ai_assisted = Column(Boolean, nullable=False, default=False)
    ai_model = Column(String(100))
    primary_target_query = Column(String(200))
    performance = Column(JSONType, nullable=False, default=dict)

    # Timestamps
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    published_at = Column(DateTime(timezone=True), index=True)
    scheduled_for = Column(DateTime(timezone=True))

    author = relationship(Author, lazy="raise")
    cluster = relationship(TopicCluster, lazy="raise")
