import pytest

from wordsuggest import SuggesterConfig, SuggestionKind, ValidationError
from wordsuggest.engines.edit_distance import EditDistanceEngine, levenshtein, normalized_score

from conftest import VOCAB

CFG = SuggesterConfig(engine="edit-distance", max_suggestions=3, min_score=0.5)


async def _engine(words=VOCAB) -> EditDistanceEngine:
    eng = EditDistanceEngine()
    await eng.initialize(words)
    return eng


@pytest.mark.parametrize("a,b,expected", [
    ("kitten", "sitting", 3),
    ("flaw", "lawn", 2),
    ("", "abc", 3),
    ("abc", "", 3),
    ("helt", "help", 1),
    ("helt", "health", 2),
    ("helt", "hello", 2),
    ("intention", "execution", 5),
])
def test_levenshtein_known_distances(a, b, expected):
    assert levenshtein(a, b) == expected


@pytest.mark.parametrize("a,b", [
    ("kitten", "sitting"), ("", "x"), ("python", "typhoon"), ("abc", "cba"), ("héllo", "hello"),
])
def test_levenshtein_is_symmetric(a, b):
    assert levenshtein(a, b) == levenshtein(b, a)


@pytest.mark.parametrize("a", ["", "a", "hello", "programming"])
def test_levenshtein_identity(a):
    assert levenshtein(a, a) == 0
    assert normalized_score(a, a, 0) == 1


def test_normalized_score_uses_longest_length():
    assert normalized_score("helt", "help", 1) == pytest.approx(0.75)
    assert normalized_score("helt", "health", 2) == pytest.approx(2 / 3)
    assert normalized_score("", "", 0) == 1


@pytest.mark.asyncio
async def test_helt_ranks_help_then_health():
    eng = await _engine()
    rows = await eng.get_suggestions("helt", CFG)
    assert [r.word for r in rows[:2]] == ["help", "health"]
    # hello (distance 2 over 5 chars) is the only other word above 0.5
    assert [r.word for r in rows] == ["help", "health", "hello"]
    assert rows[2].score == pytest.approx(0.6)
    assert all(r.kind is SuggestionKind.EDIT for r in rows)


@pytest.mark.asyncio
async def test_exact_word_comes_first_with_full_score():
    eng = await _engine()
    rows = await eng.get_suggestions("Python", CFG)
    assert rows[0].word == "python"
    assert rows[0].score == 1


@pytest.mark.asyncio
async def test_equal_scores_break_ties_by_distance():
    # both score 0.5: xb at distance 1 of 2, abcd at distance 2 of 4
    eng = await _engine(["abcd", "xb"])
    rows = await eng.get_suggestions("ab", CFG)
    assert [r.word for r in rows] == ["xb", "abcd"]


@pytest.mark.asyncio
async def test_equal_score_and_distance_keep_vocabulary_order():
    eng = await _engine(["cut", "bat", "cab"])
    rows = await eng.get_suggestions("cat", CFG)
    assert [r.word for r in rows] == ["cut", "bat", "cab"]


@pytest.mark.asyncio
async def test_engine_filters_and_truncates():
    eng = await _engine(["cat", "cot", "cut", "car", "dog"])
    cfg = CFG.replace(max_suggestions=2)
    rows = await eng.get_suggestions("cat", cfg)
    assert [r.word for r in rows] == ["cat", "cot"]
    strict = await eng.get_suggestions("cat", CFG.replace(min_score=0.9))
    assert [r.word for r in strict] == ["cat"]


@pytest.mark.asyncio
async def test_bad_vocabulary_keeps_previous_words():
    eng = await _engine()
    with pytest.raises(ValidationError):
        await eng.initialize(["ok", None])
    assert eng.vocabulary == tuple(VOCAB)


@pytest.mark.asyncio
async def test_predict_next_is_unsupported():
    eng = await _engine()
    assert await eng.predict_next("I love", CFG) == []
