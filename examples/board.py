from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from changers import (
    Change,
    Trace,
    boolean_changer,
    entity_list_changer,
    map_changer,
    object_changer,
    set_to_changer,
)


@dataclass
class Card:
    id: str
    title: str
    done: bool = False


@dataclass
class Board:
    name: str
    cards: list[Card] = field(default_factory=list)
    labels: dict[str, str] = field(default_factory=dict)


def card_changes(card: Card, change: Any) -> Card:
    # "done" is a flag, everything else a plain value
    if change[0] == "chg" and change[1] == "done":
        return object_changer(boolean_changer())(card, change)
    return object_changer(set_to_changer())(card, change)


def board_changes(value: Any, change: Any) -> Any:
    if isinstance(value, list):
        return entity_list_changer(lambda card: card.id, card_changes, name="cards")(value, change)
    if isinstance(value, dict):
        return map_changer(set_to_changer(), name="labels")(value, change)
    return set_to_changer()(value, change)


def run_board() -> tuple[Board, Trace]:
    trace = Trace()
    board_changer = object_changer(board_changes, name="board").traced(trace)
    board = Board(name="release")

    board = board_changer.fold(
        board,
        [
            Change.chg("cards", Change.set_item(Card("c1", "write notes"))),
            Change.chg("cards", Change.set_item(Card("c2", "tag release"))),
            Change.chg("cards", Change.chg("c1", Change.chg("done", Change.tgl()))),
            Change.chg("labels", Change.set("c2", "blocked")),
            Change.chg("name", Change.to("release 1.0")),
            board_changer.parse('["chg", "cards", ["del", "c2"]]'),
        ],
    )
    return board, trace


if __name__ == "__main__":
    board, trace = run_board()
    print(board)
    print(f"{len(trace.find('change_begin'))} changes applied")
