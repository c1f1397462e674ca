import datetime
import uuid
from types import SimpleNamespace

NOW = datetime.datetime(2026, 3, 1, 12, 0, tzinfo=datetime.timezone.utc)
AUTHOR_ID = uuid.UUID("11111111-1111-4111-8111-111111111111")
CLUSTER_ID = uuid.UUID("22222222-2222-4222-8222-222222222222")


def fixed_clock():
    return NOW


def make_article(**overrides) -> dict:
    article = {
        "@context": "https://schema.org",
        "@type": "BlogPosting",
        "headline": "How to choose a stand mixer",
        "description": "A practical guide to picking a stand mixer.",
        "image": None,
        "author": {"@type": "Person", "name": "Ada Baker", "url": None},
        "publisher": {
            "@type": "Organization",
            "name": "Kitchen Co",
            "logo": {"@type": "ImageObject", "url": "https://example.com/logo.png"},
        },
        "datePublished": None,
        "dateModified": None,
        "mainEntityOfPage": {
            "@type": "WebPage",
            "@id": "https://example.com/blog/stand-mixer",
        },
    }
    article.update(overrides)
    return article


def make_author(**overrides) -> SimpleNamespace:
    data = {
        "id": AUTHOR_ID,
        "name": "Ada Baker",
        "role": "Test Kitchen Lead",
        "credentials": "Ten years of recipe development",
        "profile_url": None,
        "avatar_url": None,
        "bio": None,
    }
    data.update(overrides)
    return SimpleNamespace(**data)


def make_post(**overrides) -> SimpleNamespace:
    """ORM-shaped post record for fakes."""
    data = {
        "id": uuid.uuid4(),
        "slug": "stand-mixer",
        "source_url": None,
        "source": "manual",
        "status": "draft",
        "version": 1,
        "title": "How to choose a stand mixer",
        "summary": "What matters when buying a stand mixer.",
        "hero_answer": "Pick a mixer by bowl size and motor power.",
        "sections": [
            {
                "id": str(uuid.uuid4()),
                "headingText": "What bowl size do you need?",
                "headingLevel": "h2",
                "body": "Five quarts suits most home bakers.",
                "wordCount": 6,
            }
        ],
        "faq": [],
        "primary_keyword": "stand mixer",
        "secondary_keywords": [],
        "search_intent": "informational",
        "meta_title": "Stand mixer buying guide",
        "meta_description": "Everything to check before buying a stand mixer.",
        "canonical_url": "https://example.com/blog/stand-mixer",
        "focus_questions": [],
        "internal_links": [],
        "author_id": AUTHOR_ID,
        "reviewed_by": None,
        "experience_evidence": {
            "summary": "We tested six mixers over a month.",
            "details": None,
            "placeholders": [],
        },
        "ld_json_article": make_article(),
        "ld_json_faq_page": None,
        "cluster_topic_id": None,
        "parent_post_id": None,
        "raw_html": None,
        "word_count": 15,
        "reading_time_mins": 1,
        "ai_assisted": False,
        "ai_model": None,
        "primary_target_query": None,
        "performance": {},
        "created_at": NOW - datetime.timedelta(days=2),
        "updated_at": NOW - datetime.timedelta(days=1),
        "published_at": None,
        "scheduled_for": None,
        "author": make_author(),
        "cluster": None,
    }
    data.update(overrides)
    return SimpleNamespace(**data)


def make_create_payload(**overrides) -> dict:
    payload = {
        "slug": "stand-mixer-guide",
        "title": "How to choose a stand mixer",
        "summary": "What matters when buying a stand mixer.",
        "heroAnswer": "Pick a mixer by bowl size and motor power.",
        "sections": [
            {
                "headingText": "What bowl size do you need?",
                "headingLevel": "h2",
                "body": "Five quarts suits most home bakers.",
            },
            {
                "headingText": "How much power is enough?",
                "headingLevel": "h2",
                "body": "  Around 500 watts\nhandles bread dough.  ",
            },
        ],
        "primaryKeyword": "stand mixer",
        "metaTitle": "Stand mixer buying guide",
        "metaDescription": "Everything to check before buying a stand mixer.",
        "canonicalUrl": "https://example.com/blog/stand-mixer-guide",
        "authorId": str(AUTHOR_ID),
        "experienceEvidence": {"summary": "We tested six mixers over a month."},
        "ldJsonArticle": make_article(),
    }
    payload.update(overrides)
    return payload


class FakePostsRepo:
    """
    In-memory stand-in for PostsRepo.
    Records inserts and updates so tests can assert nothing was written.
    """

    def __init__(self, posts=None):
        self.posts = {p.id: p for p in posts or []}
        self.inserted = []
        self.updates = []
        self.list_calls = []

    async def get_by_id(self, post_id, with_relations=False):
        return self.posts.get(post_id)

    async def get_by_slug(self, slug):
        return next((p for p in self.posts.values() if p.slug == slug), None)

    async def count_posts(self, filters):
        return len(self._matching(filters))

    async def list_posts(self, filters, limit, offset):
        self.list_calls.append((filters, limit, offset))
        rows = sorted(self._matching(filters), key=lambda p: p.updated_at, reverse=True)
        return rows[offset : offset + limit]

    async def insert(self, values):
        post = SimpleNamespace(**values, author=None, cluster=None)
        self.posts[post.id] = post
        self.inserted.append(post)
        return post

    async def update(self, post_id, values):
        post = self.posts[post_id]
        for key, value in values.items():
            setattr(post, key, value)
        self.updates.append((post_id, values))
        return post

    def _matching(self, filters):
        rows = list(self.posts.values())
        if filters.status:
            rows = [p for p in rows if p.status == filters.status]
        if filters.cluster_id:
            rows = [p for p in rows if p.cluster_topic_id == filters.cluster_id]
        if filters.author_id:
            rows = [p for p in rows if p.author_id == filters.author_id]
        if filters.search:
            term = filters.search.lower()
            rows = [
                p
                for p in rows
                if term in p.title.lower()
                or term in p.primary_keyword.lower()
                or term in p.slug.lower()
            ]
        return rows


class FakeAuthorsRepo:
    def __init__(self, authors=None):
        self.authors = {a.id: a for a in authors or []}

    async def get_by_id(self, author_id):
        return self.authors.get(author_id)


class FakePublisher:
    """
    External publisher stand-in; set error to make publish() raise.
    """

    def __init__(self, article_id="gid://shopify/Article/1", error=None):
        self.article_id = article_id
        self.error = error
        self.calls = []

    async def publish(self, post):
        self.calls.append(post.id)
        if self.error:
            raise self.error
        return self.article_id


def make_posts(count: int, **overrides):
    return [
        make_post(
            slug=f"post-{i}",
            updated_at=NOW - datetime.timedelta(minutes=i),
            **overrides,
        )
        for i in range(count)
    ]
