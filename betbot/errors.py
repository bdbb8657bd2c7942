"""Errors raised when bot data is used wrongly."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from betbot.datetimes import DateAndTime
    from betbot.scores import MatchScore


class BetBotError(Exception):
    """Base class of every bot data error."""


class InvalidBettorNameError(BetBotError):
    def __init__(self, bettor_name: str) -> None:
        self.bettor_name = bettor_name
        super().__init__(f"invalid bettor name: [{bettor_name}]")


class MatchNotFoundError(BetBotError):
    def __init__(self, match_id: str) -> None:
        self.match_id = match_id
        super().__init__(f"no match with id [{match_id}]")


class MatchAlreadyPlayedError(BetBotError):
    def __init__(self, match_id: str) -> None:
        self.match_id = match_id
        super().__init__(f"match [{match_id}] is already played")


class InvalidScoreError(BetBotError):
    def __init__(self, bo_size: int, score: MatchScore) -> None:
        self.bo_size = bo_size
        self.score = score
        super().__init__(f"score [{score}] is not valid for a BO{bo_size}")


class BetAlreadyExistsError(BetBotError):
    def __init__(self, match_id: str, bettor_name: str) -> None:
        self.match_id = match_id
        self.bettor_name = bettor_name
        super().__init__(f"[{bettor_name}] already has a bet on match [{match_id}]")


class BetNotFoundError(BetBotError):
    def __init__(self, match_id: str, bettor_name: str) -> None:
        self.match_id = match_id
        self.bettor_name = bettor_name
        super().__init__(f"[{bettor_name}] has no bet on match [{match_id}]")


class InvalidMatchIdError(BetBotError):
    def __init__(self, match_id: str) -> None:
        self.match_id = match_id
        super().__init__(f"invalid match id: [{match_id}]")


class MatchIdUnavailableError(BetBotError):
    def __init__(self, match_id: str) -> None:
        self.match_id = match_id
        super().__init__(f"match id [{match_id}] is already used")


class InvalidTeamNameError(BetBotError):
    def __init__(self, team_a: str, team_b: str) -> None:
        self.team_a = team_a
        self.team_b = team_b
        super().__init__(f"invalid team names: [{team_a}] and [{team_b}]")


class InvalidBoSizeError(BetBotError):
    def __init__(self, bo_size: int) -> None:
        self.bo_size = bo_size
        super().__init__(f"invalid BO size [{bo_size}], it must be odd")


class MatchNotPlayedError(BetBotError):
    def __init__(self, match_id: str) -> None:
        self.match_id = match_id
        super().__init__(f"match [{match_id}] has no result yet")


class InvalidIndexError(BetBotError):
    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"index [{index}] is outside of a list of size [{size}]")


class UnmatchingTeamNameError(BetBotError):
    def __init__(self, given_a: str, given_b: str, saved_a: str, saved_b: str) -> None:
        self.given_a = given_a
        self.given_b = given_b
        self.saved_a = saved_a
        self.saved_b = saved_b
        super().__init__(
            f"team names [{given_a}, {given_b}] do not match [{saved_a}, {saved_b}]"
        )


class InvalidDateFormatError(BetBotError):
    def __init__(self, date: str) -> None:
        self.date = date
        super().__init__(f"date [{date}] does not follow the format Year-Month-Day Hours:Minutes")


class DateTimeInThePastError(BetBotError):
    def __init__(self, date: DateAndTime) -> None:
        self.date = date
        super().__init__(f"date [{date}] is in the past")