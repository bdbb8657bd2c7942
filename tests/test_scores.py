import pytest

from betbot.scores import ComparisonResult, MatchScore


@pytest.mark.parametrize(
    "first, second",
    [((1, 0), (1, 0)), ((0, 1), (0, 1)), ((3, 1), (3, 1)), ((1, 2), (1, 2))],
)
def test_compare_perfect(first, second):
    a, b = MatchScore(*first), MatchScore(*second)
    assert a.compare(b) is ComparisonResult.PERFECT
    assert b.compare(a) is ComparisonResult.PERFECT


@pytest.mark.parametrize("first, second", [((3, 1), (3, 2)), ((1, 3), (2, 3))])
def test_compare_correct(first, second):
    a, b = MatchScore(*first), MatchScore(*second)
    assert a.compare(b) is ComparisonResult.CORRECT
    assert b.compare(a) is ComparisonResult.CORRECT


@pytest.mark.parametrize(
    "first, second", [((1, 0), (0, 1)), ((3, 2), (2, 3)), ((3, 2), (0, 3))]
)
def test_compare_incorrect(first, second):
    a, b = MatchScore(*first), MatchScore(*second)
    assert a.compare(b) is ComparisonResult.INCORRECT
    assert b.compare(a) is ComparisonResult.INCORRECT


@pytest.mark.parametrize(
    "first, second", [((1, 0), (2, 0)), ((0, 2), (2, 3)), ((3, 2), (1, 2))]
)
def test_compare_invalid(first, second):
    a, b = MatchScore(*first), MatchScore(*second)
    assert a.compare(b) is ComparisonResult.INVALID
    assert b.compare(a) is ComparisonResult.INVALID


@pytest.mark.parametrize("score, expected", [((1, 0), 1), ((1, 3), 4), ((2, 1), 3)])
def test_total_games(score, expected):
    assert MatchScore(*score).total_games == expected


@pytest.mark.parametrize("score, expected", [((1, 0), 1), ((2, 3), 3), ((2, 1), 2)])
def test_winning_score(score, expected):
    assert MatchScore(*score).winning_score == expected


@pytest.mark.parametrize("score, expected", [((1, 0), 0), ((2, 3), 2), ((2, 1), 1)])
def test_losing_score(score, expected):
    assert MatchScore(*score).losing_score == expected


@pytest.mark.parametrize(
    "score, expected", [((1, 0), "1 - 0"), ((2, 3), "2 - 3"), ((2, 1), "2 - 1")]
)
def test_str(score, expected):
    assert str(MatchScore(*score)) == expected


@pytest.mark.parametrize("score", [(1, 0), (0, 1), (3, 1), (1, 2)])
def test_equality_equals(score):
    assert (MatchScore(*score) == MatchScore(*score)) is True


@pytest.mark.parametrize(
    "first, second",
    [((3, 1), (3, 2)), ((1, 3), (2, 3)), ((1, 0), (0, 1)), ((3, 2), (2, 3)), ((3, 2), (0, 3))],
)
def test_equality_non_equals(first, second):
    assert (MatchScore(*first) == MatchScore(*second)) is False


def test_equal_scores_hash_alike():
    assert len({MatchScore(2, 1), MatchScore(2, 1), MatchScore(1, 2)}) == 2


def test_default_score_is_zero_zero():
    assert MatchScore() == MatchScore(0, 0)