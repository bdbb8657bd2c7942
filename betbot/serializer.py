"""JSON form of the bot data and saving it to a file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, TextIO

from betbot.bet import Bet
from betbot.bettor_results import BoSizeResults
from betbot.botdata import BotData
from betbot.datetimes import DateAndTime
from betbot.match import Match
from betbot.scores import MatchScore


def match_to_json(match: Match) -> dict[str, Any]:
    obj: dict[str, Any] = {
        "MatchID": match.match_id,
        "TeamAName": match.team_a,
        "TeamBName": match.team_b,
        "BoSize": match.bo_size,
    }
    if match.is_played:
        obj["TeamAScore"] = match.result.team_a
        obj["TeamBScore"] = match.result.team_b
    obj["DateTime"] = str(match.date_time)
    return obj


def bet_to_json(bet: Bet) -> dict[str, Any]:
    return {
        "MatchID": bet.match_id,
        "TeamAScore": bet.score.team_a,
        "TeamBScore": bet.score.team_b,
        "BettorName": bet.bettor_name,
    }


def bo_results_to_json(results: BoSizeResults) -> dict[str, Any]:
    return {
        "BoSize": results.bo_size,
        "PerfectBets": results.perfect_bets,
        "CorrectBets": results.correct_bets,
        "IncorrectBets": results.incorrect_bets,
        "Score": results.score,
    }


def data_to_json(data: BotData) -> dict[str, Any]:
    return {
        "Matches": [match_to_json(match) for match in data.matches],
        "Bets": [bet_to_json(bet) for bet in data.bets],
    }


def match_from_json(obj: dict[str, Any]) -> Match:
    """Build a match from its JSON form; its id feeds the id generator."""
    date_time = DateAndTime(obj["DateTime"])
    match = Match(Match.INVALID_ID, obj["TeamAName"], obj["TeamBName"], obj["BoSize"], date_time)
    match.assign_id(obj["MatchID"])
    if "TeamAScore" in obj and "TeamBScore" in obj:
        match.set_result(MatchScore(obj["TeamAScore"], obj["TeamBScore"]))
    return match


def bet_from_json(obj: dict[str, Any]) -> Bet:
    return Bet(obj["MatchID"], MatchScore(obj["TeamAScore"], obj["TeamBScore"]), obj["BettorName"])


def bo_results_from_json(obj: dict[str, Any]) -> BoSizeResults:
    return BoSizeResults(
        bo_size=obj["BoSize"],
        perfect_bets=obj["PerfectBets"],
        correct_bets=obj["CorrectBets"],
        incorrect_bets=obj["IncorrectBets"],
        score=obj["Score"],
    )


def load_data(obj: dict[str, Any], data: BotData) -> None:
    """Replace the matches and bets of data with those in obj."""
    data.matches = [match_from_json(item) for item in obj["Matches"]]
    data.bets = [bet_from_json(item) for item in obj["Bets"]]


class JsonSerializer:
    """Writes and reads bot data as compact JSON with sorted keys."""

    def serialize(self, data: BotData, stream: TextIO) -> None:
        stream.write(
            json.dumps(data_to_json(data), sort_keys=True, separators=(",", ":"), ensure_ascii=False)
        )

    def deserialize(self, stream: TextIO, data: BotData) -> None:
        load_data(json.load(stream), data)


class SaveManager:
    """Keeps the bot data in a JSON file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._serializer = JsonSerializer()

    def save(self, data: BotData) -> None:
        with self.path.open("w", encoding="utf-8") as stream:
            self._serializer.serialize(data, stream)

    def load(self, data: BotData) -> None:
        """Load the saved data into data; does nothing if the file cannot be opened."""
        try:
            stream = self.path.open(encoding="utf-8")
        except OSError:
            return
        with stream:
            self._serializer.deserialize(stream, data)