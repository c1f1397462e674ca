import json
import re
from dataclasses import dataclass, field
from typing import List

PLACEHOLDER_RE = re.compile(r"\[PLACEHOLDER[^\]]*\]")

PLACEHOLDER_BLOCKER = "Post contains unfilled placeholders"
AUTHOR_BLOCKER = "Post missing author information"
STRUCTURED_DATA_BLOCKER = "Post missing required structured data"
EXPERIENCE_BLOCKER = "Post missing experience evidence section"


@dataclass
class PublishReadiness:
    ready: bool
    blockers: List[str] = field(default_factory=list)


def check_publish_ready(post) -> PublishReadiness:
    """Decide whether a post may go live.

    Expects the post with its author loaded. Only hard blockers are reported
    here; softer SEO advice does not prevent publishing.
    """
    blockers = []

    if _has_placeholders(post):
        blockers.append(PLACEHOLDER_BLOCKER)

    author = getattr(post, "author", None)
    if not author or not getattr(author, "name", None):
        blockers.append(AUTHOR_BLOCKER)

    article = post.ld_json_article or {}
    if not article.get("headline"):
        blockers.append(STRUCTURED_DATA_BLOCKER)

    evidence = post.experience_evidence or {}
    if not (evidence.get("summary") or "").strip():
        blockers.append(EXPERIENCE_BLOCKER)

    return PublishReadiness(ready=not blockers, blockers=blockers)


def _has_placeholders(post) -> bool:
    content = json.dumps(
        [
            post.title,
            post.summary,
            post.hero_answer,
            post.sections,
            post.faq,
            post.experience_evidence,
            post.ld_json_article,
        ],
        default=str,
    )
    return bool(PLACEHOLDER_RE.search(content))
