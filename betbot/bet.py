"""A bettor's predicted score for a match."""

from __future__ import annotations

from dataclasses import dataclass

from betbot.scores import MatchScore


@dataclass
class Bet:
    """The score a bettor predicts for a match."""

    match_id: str
    score: MatchScore
    bettor_name: str