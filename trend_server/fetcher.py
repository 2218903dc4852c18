import logging
from collections import namedtuple

import requests

from . import config
from .scorer import NEUTRAL_SCORE, clamp_score, score_text

logger = logging.getLogger(__name__)


class FetchResult(namedtuple("FetchResult", ["score", "error", "posts"])):
    """Outcome of scoring one topic. ``error`` is set when the score is the neutral fallback."""

    __slots__ = ()

    @property
    def degraded(self):
        return self.error is not None


def search_posts(topic):
    response = requests.get(
        config.SEARCH_URL,
        params={"q": topic, "limit": config.SEARCH_LIMIT, "sort": config.SEARCH_SORT},
        headers={"User-Agent": config.SEARCH_USER_AGENT},
        timeout=config.SEARCH_TIMEOUT,
    )
    response.raise_for_status()
    posts = response.json()["data"]["children"]
    if not isinstance(posts, list):
        raise ValueError(f"unexpected search results: {type(posts).__name__}")
    return posts


def post_text(post):
    post_data = post["data"]
    title = post_data.get("title") or ""
    body = post_data.get("selftext") or ""
    return f"{title} {body}".lower()


def analyze_topic(topic):
    try:
        posts = search_posts(topic)

        if not posts:
            return FetchResult(NEUTRAL_SCORE, None, 0)

        total_score = 0.0
        analyzed_posts = 0
        for post in posts:
            total_score += score_text(post_text(post))
            analyzed_posts += 1

        average_score = total_score / analyzed_posts if analyzed_posts else NEUTRAL_SCORE
        return FetchResult(clamp_score(average_score), None, analyzed_posts)

    except (requests.RequestException, ValueError, KeyError, TypeError, AttributeError) as e:
        logger.warning("Error analyzing %r: %s", topic, e)
        return FetchResult(NEUTRAL_SCORE, e, 0)


def fetch_sentiment(topic):
    return analyze_topic(topic).score
