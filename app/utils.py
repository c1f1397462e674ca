import datetime
import math
from typing import Iterable, Optional

from app.settings import settings


def count_words(text: Optional[str]) -> int:
    """Number of whitespace-delimited, non-empty tokens."""
    if not text:
        return 0
    return len(text.split())


def count_post_words(hero_answer: str, section_bodies: Iterable[str]) -> int:
    return count_words(hero_answer) + sum(count_words(body) for body in section_bodies)


def calculate_reading_time(
    word_count: int, words_per_minute: int = settings.WORDS_PER_MINUTE
) -> int:
    return math.ceil(word_count / words_per_minute)


def utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def ensure_utc(value: datetime.datetime) -> datetime.datetime:
    # naive timestamps are read as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value.astimezone(datetime.timezone.utc)


def isoformat_utc(value: datetime.datetime) -> str:
    return ensure_utc(value).isoformat().replace("+00:00", "Z")
