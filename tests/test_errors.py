import pytest

from betbot.datetimes import DateAndTime
from betbot.errors import (
    BetAlreadyExistsError,
    BetBotError,
    BetNotFoundError,
    DateTimeInThePastError,
    InvalidBettorNameError,
    InvalidBoSizeError,
    InvalidDateFormatError,
    InvalidIndexError,
    InvalidMatchIdError,
    InvalidScoreError,
    InvalidTeamNameError,
    MatchAlreadyPlayedError,
    MatchIdUnavailableError,
    MatchNotFoundError,
    MatchNotPlayedError,
    UnmatchingTeamNameError,
)
from betbot.scores import MatchScore


@pytest.mark.parametrize(
    "error_type",
    [
        MatchNotFoundError,
        MatchAlreadyPlayedError,
        InvalidMatchIdError,
        MatchIdUnavailableError,
        MatchNotPlayedError,
    ],
)
def test_match_id_errors_carry_the_id(error_type):
    error = error_type("TestId")
    assert isinstance(error, BetBotError)
    assert error.match_id == "TestId"
    assert "TestId" in str(error)


@pytest.mark.parametrize("error_type", [BetAlreadyExistsError, BetNotFoundError])
def test_bet_errors_carry_match_and_bettor(error_type):
    error = error_type("TestId", "Bettor")
    assert (error.match_id, error.bettor_name) == ("TestId", "Bettor")
    assert "TestId" in str(error) and "Bettor" in str(error)


def test_invalid_bettor_name():
    error = InvalidBettorNameError("")
    assert error.bettor_name == ""
    with pytest.raises(BetBotError):
        raise error


def test_invalid_score_mentions_score_and_bo_size():
    score = MatchScore(1, 1)
    error = InvalidScoreError(3, score)
    assert error.score == score
    assert error.bo_size == 3
    assert str(score) in str(error)
    assert "BO3" in str(error)


def test_invalid_team_name():
    error = InvalidTeamNameError("TeamA", "")
    assert (error.team_a, error.team_b) == ("TeamA", "")


def test_invalid_bo_size():
    error = InvalidBoSizeError(4)
    assert error.bo_size == 4
    assert "4" in str(error)


def test_invalid_index():
    error = InvalidIndexError(11, 10)
    assert (error.index, error.size) == (11, 10)


def test_unmatching_team_name_keeps_all_names():
    error = UnmatchingTeamNameError("OtherName", "TeamB", "TeamA", "TeamB")
    assert (error.given_a, error.given_b, error.saved_a, error.saved_b) == (
        "OtherName",
        "TeamB",
        "TeamA",
        "TeamB",
    )
    assert "OtherName" in str(error)


def test_invalid_date_format():
    error = InvalidDateFormatError("Invalid")
    assert error.date == "Invalid"
    assert "Invalid" in str(error)


def test_date_in_the_past_shows_the_date():
    date = DateAndTime("1990-01-01 18:00")
    error = DateTimeInThePastError(date)
    assert error.date == date
    assert "1990-01-01 18:00" in str(error)