import pytest
from trend_server.lexicon import POSITIVE_WORDS, NEGATIVE_WORDS
from trend_server.scorer import score_text, clamp_score, NEUTRAL_SCORE


def test_lexicons_are_disjoint_lowercase_sets():
    assert not POSITIVE_WORDS & NEGATIVE_WORDS
    assert all(word == word.lower() for word in POSITIVE_WORDS | NEGATIVE_WORDS)
    assert "perfect" in POSITIVE_WORDS


@pytest.mark.parametrize("text", ["", "   ", "a b c ! ?", "x. y, z;"])
def test_no_countable_words_is_neutral(text):
    assert score_text(text) == NEUTRAL_SCORE


def test_all_positive_clamps_to_one():
    assert score_text("great awesome love") == 1.0


def test_all_negative_clamps_to_zero():
    assert score_text("terrible awful hate") == 0.0


def test_ratio_arithmetic():
    # 1 positive, 1 negative, 2 neutral out of 4 counted words
    assert score_text("good movie bad ending") == pytest.approx(0.5)
    # 1 positive out of 4 counted words
    assert score_text("this was good overall") == pytest.approx(0.75)
    # 1 negative out of 5 counted words
    assert score_text("honestly the plot was slow") == pytest.approx(0.3)


def test_punctuation_and_case_are_stripped():
    assert score_text("GREAT!!! movie...") == score_text("great movie")


def test_short_tokens_do_not_count_toward_total():
    assert score_text("good a b c") == score_text("good")
    assert score_text("good") == 1.0


def test_non_ascii_characters_are_stripped():
    # tokens with no ASCII word characters are dropped like short tokens
    assert score_text("good 日本語 テスト") == 1.0
    assert score_text("great привет") == 1.0
    # accented letters are stripped, the ASCII remainder still counts
    assert score_text("good café") == pytest.approx(1.0)
    assert score_text("bad naïve opinion") == score_text("bad nave opinion")


def test_order_independent():
    assert score_text("bad day good night") == score_text("good night bad day")


def test_more_positive_words_never_lowers_score():
    base = score_text("good film with plot twist")
    doubled = score_text("good film good plot twist")
    assert doubled >= base


def test_positive_words_beat_neutral_filler():
    assert score_text("the show was amazing wonderful") > score_text("the show was purple orange")


@pytest.mark.parametrize("text", [
    "bad bad bad bad good",
    "great " * 50,
    "scam fraud trash, really? garbage!!",
    "neutral words only here",
])
def test_score_in_unit_interval(text):
    assert 0.0 <= score_text(text) <= 1.0


def test_deterministic():
    text = "Love the new update but the app is slow"
    assert score_text(text) == score_text(text)


def test_clamp_score():
    assert clamp_score(-0.2) == 0.0
    assert clamp_score(1.7) == 1.0
    assert clamp_score(0.42) == 0.42
