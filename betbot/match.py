"""A match between two teams played as a best-of series."""

from __future__ import annotations

import re
from typing import ClassVar

from betbot.datetimes import DateAndTime
from betbot.errors import InvalidScoreError, MatchNotPlayedError
from betbot.scores import MatchScore

_LEADING_NUMBER = re.compile(r"\s*([+-]?\d+)")


class Match:
    """A match, identified by its id, with an optional result."""

    FIRST_ID: ClassVar[int] = 0
    ID_PREFIX: ClassVar[str] = "MATCH_BOT_ID_"
    INVALID_ID: ClassVar[str] = "MATCH_INVALID_ID"
    MINIMAL_BO_SIZE: ClassVar[int] = 1

    _next_id: ClassVar[int] = FIRST_ID

    def __init__(
        self,
        match_id: str | None,
        team_a: str,
        team_b: str,
        bo_size: int,
        date_time: DateAndTime,
    ) -> None:
        if match_id is None:
            match_id = f"{Match.ID_PREFIX}{Match._next_id}"
            Match._next_id += 1
        self._match_id = match_id
        self.team_a = team_a
        self.team_b = team_b
        self.bo_size = bo_size
        self.date_time = date_time
        self._result: MatchScore | None = None

    @property
    def match_id(self) -> str:
        return self._match_id

    def assign_id(self, match_id: str) -> None:
        """Set the id of a loaded match, keeping generated ids from clashing with it."""
        self._match_id = match_id
        cut = match_id.rfind("_") + 1
        if match_id[:cut] != Match.ID_PREFIX:
            return
        number = _LEADING_NUMBER.match(match_id[cut:])
        if number is None:
            raise ValueError(f"match id {match_id!r} has no number after its prefix")
        value = int(number.group(1))
        if Match._next_id <= value:
            Match._next_id = value + 1

    @property
    def games_to_win(self) -> int:
        """Games a team must win to take the series."""
        return self.bo_size // 2 + 1

    @property
    def is_played(self) -> bool:
        return self._result is not None

    def is_valid_score(self, score: MatchScore) -> bool:
        """Whether the score can end a series of this length."""
        if self.bo_size < score.total_games:
            return False
        to_win = self.games_to_win
        return score.team_a == to_win or score.team_b == to_win

    @property
    def result(self) -> MatchScore:
        """The final score; raises MatchNotPlayedError if there is none."""
        if self._result is None:
            raise MatchNotPlayedError(self._match_id)
        return self._result

    def set_result(self, score: MatchScore) -> None:
        if not self.is_valid_score(score):
            raise InvalidScoreError(self.bo_size, score)
        self._result = score

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Match):
            return NotImplemented
        return self._match_id == other._match_id

    def __hash__(self) -> int:
        return hash(self._match_id)

    def __str__(self) -> str:
        return f"{self.team_a} - {self.team_b}"

    def __repr__(self) -> str:
        return f"Match({self._match_id!r}, {self.team_a!r}, {self.team_b!r}, BO{self.bo_size})"