"""Points and bet counts of one bettor over played matches."""

from __future__ import annotations

import functools
from collections.abc import Iterable
from dataclasses import dataclass

from betbot.errors import InvalidScoreError
from betbot.scores import ComparisonResult, MatchScore

CORRECT_WINNING_TEAM_SCORE = 2


@dataclass
class BoSizeResults:
    """Bet counts and points for matches of one series length."""

    bo_size: int = 1
    perfect_bets: int = 0
    correct_bets: int = 0
    incorrect_bets: int = 0
    score: int = 0

    @property
    def total_bets(self) -> int:
        return self.perfect_bets + self.correct_bets + self.incorrect_bets


@functools.total_ordering
class BettorResults:
    """A bettor's results, ordered by points, then perfect bets, then name."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, bettor_name: str = "", results: Iterable[BoSizeResults] | None = None) -> None:
        self.bettor_name = bettor_name
        self.results: list[BoSizeResults] = list(results) if results is not None else []

    def _entry_for(self, bo_size: int) -> BoSizeResults:
        for entry in self.results:
            if entry.bo_size == bo_size:
                return entry
        entry = BoSizeResults(bo_size)
        self.results.append(entry)
        return entry

    def add_result(self, bo_size: int, match_score: MatchScore, bet_score: MatchScore) -> None:
        """Count a bet against the final score of a match.

        A bet with the right winner earns CORRECT_WINNING_TEAM_SCORE points plus a
        bonus that grows as the losing team's score gets closer to the real one,
        from 0 up to (bo_size + 1) // 2 - 1 for the exact score.
        """
        entry = self._entry_for(bo_size)
        outcome = match_score.compare(bet_score)
        if outcome is ComparisonResult.PERFECT:
            entry.perfect_bets += 1
            entry.score += CORRECT_WINNING_TEAM_SCORE + (bo_size + 1) // 2 - 1
        elif outcome is ComparisonResult.CORRECT:
            entry.correct_bets += 1
            delta = abs(match_score.losing_score - bet_score.losing_score)
            entry.score += CORRECT_WINNING_TEAM_SCORE + (bo_size + 1) // 2 - (delta + 1)
        elif outcome is ComparisonResult.INCORRECT:
            entry.incorrect_bets += 1
        else:
            raise InvalidScoreError(bo_size, match_score)

    @property
    def score(self) -> int:
        return sum(entry.score for entry in self.results)

    @property
    def perfect_bets(self) -> int:
        return sum(entry.perfect_bets for entry in self.results)

    @property
    def max_bo_size(self) -> int:
        return max((entry.bo_size for entry in self.results), default=0)

    def _key(self) -> tuple[int, int, str]:
        return (self.score, self.perfect_bets, self.bettor_name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BettorResults):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BettorResults):
            return NotImplemented
        return self._key() < other._key()

    def __repr__(self) -> str:
        return f"BettorResults({self.bettor_name!r}, {self.results!r})"