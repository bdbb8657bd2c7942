# betbot

The core of a bot for friendly bets between friends. People register
upcoming matches (best-of-N series between two teams), everyone bets on
the final score, results are entered once a match is over, and each
bettor's points are counted.

The package holds the match and bet store with its rules, the scoring of
bets, saving to and loading from a JSON file, building answer messages
and text tables, a folder watcher, and the configuration reader.

## Working with the data store

```python
from betbot.botdata import AddMatchParams, AddResultParams, BotData
from betbot.scores import MatchScore

data = BotData()

# match id (or None to get a generated one), team A, team B, BO size, date
data.add_match(AddMatchParams("final", "Red", "Blue", 3, "2100-01-31 18:00"))

data.add_bet("final", MatchScore(2, 1), "alice")
data.add_bet("final", MatchScore(0, 2), "bob")
data.modify_bet("final", MatchScore(2, 0), "alice")

# match id, team A name, team B name, team A score, team B score
data.add_result(AddResultParams("final", "Red", "Blue", 2, 0))

print([str(match) for match in data.past_matches()])   # ['Red - Blue']
```

Other queries: `get_match`, `get_bet`, `has_match`, `has_bet`,
`bets_on_match`, `incoming_matches`, and `clear` to forget everything.

Every invalid operation raises an exception from `betbot.errors`, all of
them subclasses of `BetBotError`: an unknown match raises
`MatchNotFoundError`, an empty id or `Match.INVALID_ID` raises
`InvalidMatchIdError`, a score that cannot end the series raises
`InvalidScoreError`, a badly written date raises `InvalidDateFormatError`,
a date in the past raises `DateTimeInThePastError`, and so on.

Rules enforced by the store:

- match ids must be unique; without one, an id `MATCH_BOT_ID_<n>` is
  generated;
- both team names must be non-empty, the BO size must be odd, and the
  date (`Year-Month-Day Hours:Minutes`, local time) must be in the future;
- a bet or a result must be a finished score for the match's BO size
  (for a BO3: 2-0, 2-1, 1-2 or 0-2);
- a bettor has at most one bet per match; no bet can be placed or changed,
  and no second result set, once a match has a result;
- a result given with swapped team names is swapped back to the stored
  order; names that match neither order raise `UnmatchingTeamNameError`.

## Scores

`betbot.scores.MatchScore(team_a, team_b)` compares with another score
through `compare`, which returns a `ComparisonResult`: `PERFECT` (same
score), `CORRECT` (same winner), `INCORRECT` (other winner) or `INVALID`
(the winning scores differ, so the series lengths do not agree).
`str(MatchScore(2, 1))` is `"2 - 1"`.

## Counting points

`betbot.bettor_results.BettorResults` keeps one bettor's counts per BO
size. For each played match, `add_result(bo_size, match_score, bet_score)`
gives:

- **perfect bet**: 2 points plus `(bo_size + 1) // 2 - 1`;
- **correct bet**: 2 points plus a bonus that shrinks the further the
  predicted losing-team score is from the real one;
- **incorrect bet**: nothing.

```python
from betbot.bettor_results import BettorResults
from betbot.scores import MatchScore

alice = BettorResults("alice")
alice.add_result(3, MatchScore(2, 0), MatchScore(2, 0))
print(alice.score, alice.perfect_bets)   # 3 1
```

`BettorResults` objects order by total points, then perfect bets, then
name, so `sorted(results, reverse=True)` ranks bettors best first.

## Saving and loading

```python
from betbot.serializer import SaveManager

saver = SaveManager("bets.json")
saver.save(data)
saver.load(data)   # does nothing if the file cannot be opened
```

The save file is a JSON object with a `Matches` array and a `Bets` array.
`data_to_json`, `load_data` and the per-item `*_to_json` / `*_from_json`
functions of `betbot.serializer` give the same form as plain dictionaries.
Loading a match whose id is a generated one moves the id generator past
it, so new matches do not reuse it.

## Messages and tables

`betbot.messages` describes answers as plain data: `build_answer` makes an
ephemeral `Message`, and `add_selector`, `add_embed` and `add_button`
attach `SelectorParams`, `EmbedParams` and `ButtonParams` to it.
`build_table(columns)` draws columns of words as a centred text table in a
code block, and returns an empty string when a column is empty.

## Watching a folder

```python
from datetime import timedelta
from betbot.file_watcher import FileWatcher

with FileWatcher("incoming", timedelta(minutes=5), print) as watcher:
    watcher.check()   # also runs by itself at every interval
```

Every file and folder under the watched folder is passed to the callback;
an entry the callback leaves in place is passed again at the next check.

## Configuration

`betbot.config.read_config(path)` (default `config.json`) reads a file
such as:

```json
{
    "BotToken": "token",
    "ChannelId": "42",
    "SaveFile": "bets.json",
    "NewMatchesFolder": "incoming/matches",
    "NewResultsFolder": "incoming/results",
    "DelayBetweenChecks": "5"
}
```

and returns a `BotConfig`. All keys must be present (else
`MissingConfigKeyError`) and hold strings. `BotToken`, `ChannelId` and
`SaveFile` must not be empty (else `EmptyConfigValueError`), the channel
id must be a number and the save file must end in `.json` (else
`ConfigError`). A folder that is empty or not an existing directory reads
as `None`; an empty delay reads as `None`, otherwise it is a number of
minutes.

## What the package does not do

It does not connect to a chat service and has no command to start a bot.
There are no slash commands or menu handlers that turn chat events into
answers, no ready-made leaderboard message, and nothing that reads the
files found by `FileWatcher` and turns them into new matches or results:
those pieces are left to the program that uses this package.