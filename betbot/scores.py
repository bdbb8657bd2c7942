"""Scores of a best-of series and how two scores compare."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ComparisonResult(enum.Enum):
    """Outcome of comparing a real score with a predicted one."""

    PERFECT = enum.auto()
    """Same winner and same score for both teams."""
    CORRECT = enum.auto()
    """Same winner, different score for the losing team."""
    INCORRECT = enum.auto()
    """Different winners."""
    INVALID = enum.auto()
    """The scores cannot be compared, e.g. they belong to different series lengths."""


@dataclass(frozen=True, eq=False)
class MatchScore:
    """Number of games won by team A and team B."""

    team_a: int = 0
    team_b: int = 0

    @property
    def total_games(self) -> int:
        """Number of games played."""
        return self.team_a + self.team_b

    @property
    def losing_score(self) -> int:
        """Games won by the team that lost the series."""
        return self.team_b if self.team_a > self.team_b else self.team_a

    @property
    def winning_score(self) -> int:
        """Games won by the team that won the series."""
        return self.team_a if self.team_a > self.team_b else self.team_b

    def compare(self, other: MatchScore) -> ComparisonResult:
        """Compare this score with another one."""
        if self.winning_score != other.winning_score:
            return ComparisonResult.INVALID
        if self.team_a == other.team_a and self.team_b == other.team_b:
            return ComparisonResult.PERFECT
        same_winner = (self.team_a > self.team_b and other.team_a > other.team_b) or (
            self.team_b > self.team_a and other.team_b > other.team_a
        )
        if same_winner:
            return ComparisonResult.CORRECT
        return ComparisonResult.INCORRECT

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatchScore):
            return NotImplemented
        return self.compare(other) is ComparisonResult.PERFECT

    def __hash__(self) -> int:
        return hash((self.team_a, self.team_b))

    def __str__(self) -> str:
        return f"{self.team_a} - {self.team_b}"