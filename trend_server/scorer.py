import re

from .lexicon import POSITIVE_WORDS, NEGATIVE_WORDS

NEUTRAL_SCORE = 0.5
MIN_WORD_LENGTH = 2

_NON_WORD = re.compile(r"[^\w]", re.ASCII)


def clamp_score(value):
    return max(0.0, min(1.0, value))


def score_text(text):
    """Score text on a 0..1 scale from the share of positive and negative words.

    Tokens shorter than two characters after stripping punctuation are ignored
    entirely. Text with no countable tokens scores neutral.
    """
    positive_count = 0
    negative_count = 0
    total_words = 0

    for word in text.lower().split():
        clean_word = _NON_WORD.sub("", word)
        if len(clean_word) < MIN_WORD_LENGTH:
            continue

        if clean_word in POSITIVE_WORDS:
            positive_count += 1
        if clean_word in NEGATIVE_WORDS:
            negative_count += 1
        total_words += 1

    if total_words == 0:
        return NEUTRAL_SCORE

    positive_ratio = positive_count / total_words
    negative_ratio = negative_count / total_words

    return clamp_score(NEUTRAL_SCORE + (positive_ratio - negative_ratio))
