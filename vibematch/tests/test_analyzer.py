import pytest

from vibematch.vibes.analyzer import analyze_text, round_score
from vibematch.vibes.lexicon import COZY_LEXICON, FOCUS_LEXICON, NOISE_LEXICON, Lexicon

LOUDNESS = Lexicon(leans_high=("loud",), leans_low=("quiet",), moderate=("ambient",))


@pytest.mark.parametrize("lexicon", [NOISE_LEXICON, COZY_LEXICON, FOCUS_LEXICON])
def test_no_keyword_hits_is_neutral(lexicon):
    assert analyze_text("we had lunch here", lexicon) == 50.0
    assert analyze_text("", lexicon) == 50.0


def test_high_and_low_hits_move_by_fifteen():
    assert analyze_text("a loud room", LOUDNESS) == 65.0
    assert analyze_text("a quiet room", LOUDNESS) == 35.0
    assert analyze_text("quiet mornings, loud evenings", LOUDNESS) == 50.0


def test_repeated_phrase_counts_once():
    assert analyze_text("loud loud loud", LOUDNESS) == 65.0


def test_overlapping_entries_each_count():
    # "working" contains both "work" and "working"
    assert analyze_text("great for working remotely", FOCUS_LEXICON) == 80.0


def test_matching_is_case_insensitive():
    assert analyze_text("LOUD", LOUDNESS) == 65.0


def test_moderate_pulls_towards_middle():
    lexicon = Lexicon(leans_high=("alpha", "beta"), moderate=("mid", "centre"))
    assert analyze_text("alpha beta mid", lexicon) == pytest.approx(77.0)
    assert analyze_text("alpha beta mid centre", lexicon) == pytest.approx(74.3)


def test_moderate_applied_after_high_and_low_regardless_of_text_order():
    assert analyze_text("ambient loud", LOUDNESS) == analyze_text("loud ambient", LOUDNESS)
    assert analyze_text("ambient loud", LOUDNESS) == pytest.approx(63.5)


def test_score_clamps_high():
    assert analyze_text("cozy warm intimate homey snug", COZY_LEXICON) == 100.0


def test_score_clamps_low():
    assert analyze_text("sterile cold industrial minimalist", COZY_LEXICON) == 0.0


def test_round_score_rounds_half_up():
    assert round_score(36.5) == 37
    assert round_score(36.4999) == 36
    assert round_score(0.5) == 1
    assert round_score(100.0) == 100
