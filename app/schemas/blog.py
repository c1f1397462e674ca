import datetime
import uuid
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

from app.utils import ensure_utc, utcnow

PostStatus = Literal[
    "idea", "brief", "draft", "reviewing", "scheduled", "published", "archived"
]
ContentSource = Literal["shopify", "custom_nextjs", "manual"]
SearchIntent = Literal["informational", "commercial", "transactional", "navigational"]
LinkType = Literal["product", "collection", "blog_post", "category", "external"]
PublishTarget = Literal["database", "shopify", "both"]

SLUG_PATTERN = r"^[a-z0-9]+(-[a-z0-9]+)*$"


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


# --- Embedded objects ---


class Section(CamelModel):
    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    heading_text: str = Field(..., min_length=1, max_length=150)
    heading_level: Literal["h2", "h3"] = "h2"
    body: str
    word_count: int = Field(0, ge=0)


class FAQ(CamelModel):
    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    question: str = Field(..., min_length=1, max_length=300)
    answer: str = Field(..., min_length=1, max_length=1000)


class InternalLink(CamelModel):
    href: str = Field(..., min_length=1)
    anchor_text: str = Field(..., min_length=1, max_length=100)
    link_type: LinkType
    target_post_id: Optional[uuid.UUID] = None


class Reviewer(CamelModel):
    id: Optional[uuid.UUID] = None
    name: str
    role: str
    credentials: str


class ExperienceEvidence(CamelModel):
    summary: str
    details: Optional[str] = None
    placeholders: List[str] = Field(default_factory=list)


class JsonLdPerson(CamelModel):
    type: Literal["Person"] = Field("Person", alias="@type")
    name: str
    url: Optional[str] = None
    job_title: Optional[str] = None
    description: Optional[str] = None


class JsonLdImage(CamelModel):
    type: Literal["ImageObject"] = Field("ImageObject", alias="@type")
    url: str


class JsonLdOrganization(CamelModel):
    type: Literal["Organization"] = Field("Organization", alias="@type")
    name: str
    logo: JsonLdImage


class JsonLdWebPage(CamelModel):
    type: Literal["WebPage"] = Field("WebPage", alias="@type")
    id: str = Field(..., alias="@id")


class ArticleJsonLd(CamelModel):
    """Article structured data embedded in each post.

    ``datePublished`` and ``dateModified`` always travel together; publishing
    sets both to the same instant.
    """

    context: Literal["https://schema.org"] = Field(
        "https://schema.org", alias="@context"
    )
    type: Literal["Article", "BlogPosting"] = Field("BlogPosting", alias="@type")
    headline: str
    description: str
    image: Optional[str] = None
    author: JsonLdPerson
    publisher: JsonLdOrganization
    date_published: Optional[str] = None
    date_modified: Optional[str] = None
    main_entity_of_page: JsonLdWebPage
    keywords: Optional[str] = None


# --- Requests ---


class CreatePostRequest(CamelModel):
    id: Optional[uuid.UUID] = None
    slug: str = Field(..., min_length=3, max_length=100, pattern=SLUG_PATTERN)
    source_url: Optional[str] = Field(None, max_length=500)
    source: ContentSource = "manual"
    status: PostStatus = "draft"
    version: int = Field(1, ge=1)

    title: str = Field(..., min_length=1, max_length=200)
    summary: str = Field(..., min_length=1, max_length=500)
    hero_answer: str = Field(..., min_length=1)
    sections: List[Section] = Field(..., min_length=1)
    faq: List[FAQ] = Field(default_factory=list)

    primary_keyword: str = Field(..., min_length=1, max_length=100)
    secondary_keywords: List[str] = Field(default_factory=list)
    search_intent: SearchIntent = "informational"
    meta_title: str = Field(..., min_length=1, max_length=100)
    meta_description: str = Field(..., min_length=1, max_length=200)
    canonical_url: str = Field(..., min_length=1, max_length=500)
    focus_questions: List[str] = Field(default_factory=list)
    internal_links: List[InternalLink] = Field(default_factory=list)

    author_id: uuid.UUID
    reviewed_by: Optional[Reviewer] = None
    experience_evidence: ExperienceEvidence

    ld_json_article: ArticleJsonLd
    ld_json_faq_page: Optional[Dict[str, Any]] = None

    cluster_topic_id: Optional[uuid.UUID] = None
    parent_post_id: Optional[uuid.UUID] = None

    raw_html: Optional[str] = None
    ai_assisted: bool = False
    ai_model: Optional[str] = Field(None, max_length=100)
    primary_target_query: Optional[str] = Field(None, max_length=200)

    published_at: Optional[datetime.datetime] = None
    scheduled_for: Optional[datetime.datetime] = None

    @model_validator(mode="after")
    def check_status_timestamps(self):
        if self.status == "scheduled":
            if self.scheduled_for is None:
                raise ValueError("scheduledFor is required for scheduled posts")
            if ensure_utc(self.scheduled_for) <= utcnow():
                raise ValueError("scheduledFor must be in the future")
            if self.published_at is not None:
                raise ValueError("publishedAt must be empty for scheduled posts")
        elif self.status == "published":
            if self.published_at is None:
                raise ValueError("publishedAt is required for published posts")
            if self.scheduled_for is not None:
                raise ValueError("scheduledFor must be empty for published posts")
        elif self.scheduled_for is not None or self.published_at is not None:
            raise ValueError(
                f"publishedAt and scheduledFor must be empty for {self.status} posts"
            )
        return self


class PublishRequest(CamelModel):
    publish_to: PublishTarget
    scheduled_for: Optional[datetime.datetime] = None

    @field_validator("scheduled_for", mode="before")
    @classmethod
    def blank_schedule_means_now(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


# --- Responses ---


class AuthorOut(CamelModel):
    id: uuid.UUID
    name: str
    role: str
    credentials: str
    profile_url: Optional[str] = None
    avatar_url: Optional[str] = None
    bio: Optional[str] = None


class ClusterOut(CamelModel):
    id: uuid.UUID
    name: str
    description: Optional[str] = None
    pillar_post_id: Optional[uuid.UUID] = None
    parent_id: Optional[uuid.UUID] = None


class PostOut(CamelModel):
    id: uuid.UUID
    slug: str
    source_url: Optional[str] = None
    source: str
    status: str
    version: int

    title: str
    summary: str
    hero_answer: str
    sections: List[Section] = Field(default_factory=list)
    faq: List[FAQ] = Field(default_factory=list)

    primary_keyword: str
    secondary_keywords: List[str] = Field(default_factory=list)
    search_intent: str
    meta_title: str
    meta_description: str
    canonical_url: str
    focus_questions: List[str] = Field(default_factory=list)
    internal_links: List[InternalLink] = Field(default_factory=list)

    author_id: uuid.UUID
    reviewed_by: Optional[Reviewer] = None
    experience_evidence: ExperienceEvidence
    ld_json_article: ArticleJsonLd
    ld_json_faq_page: Optional[Dict[str, Any]] = None

    cluster_topic_id: Optional[uuid.UUID] = None
    parent_post_id: Optional[uuid.UUID] = None

    raw_html: Optional[str] = None
    word_count: int
    reading_time_mins: int
    ai_assisted: bool = False
    ai_model: Optional[str] = None
    primary_target_query: Optional[str] = None
    performance: Dict[str, Any] = Field(default_factory=dict)

    created_at: datetime.datetime
    updated_at: datetime.datetime
    published_at: Optional[datetime.datetime] = None
    scheduled_for: Optional[datetime.datetime] = None


class PostWithRelations(PostOut):
    author: Optional[AuthorOut] = None
    cluster: Optional[ClusterOut] = None


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    has_more: bool


class PostListResponse(CamelModel):
    posts: List[PostWithRelations]
    pagination: Pagination


class PostResponse(CamelModel):
    post: PostOut


class PostDetailResponse(CamelModel):
    post: PostWithRelations


class ReadinessResponse(CamelModel):
    publish_ready: bool
    publish_blockers: List[str] = Field(default_factory=list)
