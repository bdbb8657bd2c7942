"""In-memory store of matches and bets, with the rules for changing them."""

from __future__ import annotations

from dataclasses import dataclass, field

from betbot.bet import Bet
from betbot.datetimes import DateAndTime
from betbot.errors import (
    BetAlreadyExistsError,
    BetNotFoundError,
    DateTimeInThePastError,
    InvalidBettorNameError,
    InvalidBoSizeError,
    InvalidMatchIdError,
    InvalidScoreError,
    InvalidTeamNameError,
    MatchAlreadyPlayedError,
    MatchIdUnavailableError,
    MatchNotFoundError,
    UnmatchingTeamNameError,
)
from betbot.match import Match
from betbot.scores import MatchScore


@dataclass(frozen=True)
class AddMatchParams:
    """What is needed to create a match; without an id one is generated."""

    match_id: str | None
    team_a: str
    team_b: str
    bo_size: int
    date_time: str


@dataclass(frozen=True)
class AddResultParams:
    """A final score; team names, when given, tell which score is whose."""

    match_id: str
    team_a: str | None
    team_b: str | None
    team_a_score: int
    team_b_score: int


def _check_match_id(match_id: str) -> None:
    if not match_id or match_id == Match.INVALID_ID:
        raise InvalidMatchIdError(match_id)


def _evaluate_score(params: AddResultParams, match: Match) -> MatchScore:
    if params.team_a is not None and params.team_b is not None:
        if match.team_a == params.team_a and match.team_b == params.team_b:
            return MatchScore(params.team_a_score, params.team_b_score)
        if match.team_a == params.team_b and match.team_b == params.team_a:
            return MatchScore(params.team_b_score, params.team_a_score)
        raise UnmatchingTeamNameError(params.team_a, params.team_b, match.team_a, match.team_b)
    return MatchScore(params.team_a_score, params.team_b_score)


@dataclass
class BotData:
    """All matches and bets known to the bot."""

    matches: list[Match] = field(default_factory=list)
    bets: list[Bet] = field(default_factory=list)

    def add_match(self, params: AddMatchParams) -> None:
        if params.match_id is not None:
            if not params.match_id or params.match_id == Match.INVALID_ID:
                raise InvalidMatchIdError(params.match_id)
            if self.has_match(params.match_id):
                raise MatchIdUnavailableError(params.match_id)
        if not params.team_a or not params.team_b:
            raise InvalidTeamNameError(params.team_a, params.team_b)
        if params.bo_size % 2 != 1:
            raise InvalidBoSizeError(params.bo_size)
        date_time = DateAndTime(params.date_time)
        if not date_time.is_in_future():
            raise DateTimeInThePastError(date_time)
        self.matches.append(
            Match(params.match_id, params.team_a, params.team_b, params.bo_size, date_time)
        )

    def add_bet(self, match_id: str, score: MatchScore, bettor_name: str) -> None:
        if not self.has_match(match_id):
            raise MatchNotFoundError(match_id)
        match = self.get_match(match_id)
        if match.is_played:
            raise MatchAlreadyPlayedError(match_id)
        if not match.is_valid_score(score):
            raise InvalidScoreError(match.bo_size, score)
        if not bettor_name:
            raise InvalidBettorNameError(bettor_name)
        if self.has_bet(match_id, bettor_name):
            raise BetAlreadyExistsError(match_id, bettor_name)
        self.bets.append(Bet(match_id, score, bettor_name))

    def add_result(self, params: AddResultParams) -> None:
        if not self.has_match(params.match_id):
            raise MatchNotFoundError(params.match_id)
        match = self.get_match(params.match_id)
        if match.is_played:
            raise MatchAlreadyPlayedError(params.match_id)
        match.set_result(_evaluate_score(params, match))

    def modify_bet(self, match_id: str, score: MatchScore, bettor_name: str) -> None:
        if not self.has_bet(match_id, bettor_name):
            raise BetNotFoundError(match_id, bettor_name)
        match = self.get_match(match_id)
        if match.is_played:
            raise MatchAlreadyPlayedError(match_id)
        if not match.is_valid_score(score):
            raise InvalidScoreError(match.bo_size, score)
        self.get_bet(match_id, bettor_name).score = score

    def clear(self) -> None:
        """Forget every bet and match."""
        self.bets.clear()
        self.matches.clear()

    def get_match(self, match_id: str) -> Match:
        _check_match_id(match_id)
        for match in self.matches:
            if match.match_id == match_id:
                return match
        raise MatchNotFoundError(match_id)

    def get_bet(self, match_id: str, bettor_name: str) -> Bet:
        _check_match_id(match_id)
        if not bettor_name:
            raise InvalidBettorNameError(bettor_name)
        for bet in self.bets:
            if bet.match_id == match_id and bet.bettor_name == bettor_name:
                return bet
        raise BetNotFoundError(match_id, bettor_name)

    def bets_on_match(self, match_id: str) -> list[Bet]:
        if not self.has_match(match_id):
            raise MatchNotFoundError(match_id)
        return [bet for bet in self.bets if bet.match_id == match_id]

    def incoming_matches(self) -> list[Match]:
        """Matches without a result, in insertion order."""
        return [match for match in self.matches if not match.is_played]

    def past_matches(self) -> list[Match]:
        """Matches with a result, in insertion order."""
        return [match for match in self.matches if match.is_played]

    def has_match(self, match_id: str) -> bool:
        _check_match_id(match_id)
        return any(match.match_id == match_id for match in self.matches)

    def has_bet(self, match_id: str, bettor_name: str) -> bool:
        if not self.has_match(match_id):
            raise MatchNotFoundError(match_id)
        if not bettor_name:
            raise InvalidBettorNameError(bettor_name)
        return any(
            bet.match_id == match_id and bet.bettor_name == bettor_name for bet in self.bets
        )