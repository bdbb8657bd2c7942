"""Chat messages sent as answers, with selectors, embeds, buttons and text tables."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Union

SelectorOption = tuple[str, str]
"""Displayed text of an option and the value it sends back."""

Field = tuple[str, str]
"""Title and content of an embed field."""

_SPACES_AROUND_WORD_IN_CELL = 2
_TABLE_LINE_SEPARATOR = "-"
_TABLE_COLUMN_SEPARATOR = "|"
_TABLE_CELL_ANGLE = "+"


@dataclass
class SelectorParams:
    """A drop-down menu: its id, its options and the text shown when empty."""

    custom_id: str
    options: list[SelectorOption]
    placeholder: str


@dataclass
class EmbedParams:
    """A rich block with a title, a description and titled fields."""

    title: str
    description: str
    fields: list[Field] = field(default_factory=list)


@dataclass
class ButtonParams:
    """A clickable button and the id it sends back."""

    label: str
    custom_id: str


Component = Union[SelectorParams, ButtonParams]


@dataclass
class Message:
    """A message for a channel; each component sits in a row of its own."""

    channel_id: int
    content: str
    ephemeral: bool = False
    components: list[Component] = field(default_factory=list)
    embeds: list[EmbedParams] = field(default_factory=list)


def build_answer(channel_id: int, content: str) -> Message:
    """An answer only the user who asked can see."""
    return Message(channel_id, content, ephemeral=True)


def add_selector(params: SelectorParams, message: Message) -> None:
    message.components.append(
        SelectorParams(params.custom_id, list(params.options), params.placeholder)
    )


def add_embed(params: EmbedParams, message: Message) -> None:
    message.embeds.append(EmbedParams(params.title, params.description, list(params.fields)))


def add_button(params: ButtonParams, message: Message) -> None:
    message.components.append(ButtonParams(params.label, params.custom_id))


def _separative_line(column_sizes: Sequence[int]) -> str:
    cells = (
        _TABLE_LINE_SEPARATOR * (size + 2 * _SPACES_AROUND_WORD_IN_CELL) + _TABLE_CELL_ANGLE
        for size in column_sizes
    )
    return _TABLE_CELL_ANGLE + "".join(cells) + "\n"


def _cell(word: str, column_size: int) -> str:
    spaces = 2 * _SPACES_AROUND_WORD_IN_CELL + column_size - len(word)
    before = spaces // 2
    after = spaces - before
    return _TABLE_COLUMN_SEPARATOR + " " * before + word + " " * after


def build_table(columns: Sequence[Sequence[str]]) -> str:
    """Draw columns of words as a centred text table inside a code block.

    Every column must hold the same number of lines. An empty string is
    returned when there is no column or when one of them has nothing to show.
    """
    sizes = [max((len(word) for word in column), default=0) for column in columns]
    if not sizes or 0 in sizes:
        return ""

    separator = _separative_line(sizes)
    parts = ["```\n", separator]
    for row in zip(*columns):
        parts.extend(_cell(word, size) for word, size in zip(row, sizes))
        parts.append(_TABLE_COLUMN_SEPARATOR + "\n")
        parts.append(separator)
    parts.append("```\n")
    return "".join(parts)