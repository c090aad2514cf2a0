"""Maze scenarios, their items and the links between them."""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass
from enum import Enum
from os import PathLike

from graphquest.textio import read_csv, split_string

START_ID = "1"
ITEM_NAME_LENGTH = 10
NO_EXIT = -1
_FIELD_COUNT = 9
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    """Read the integer at the start of text, or 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class Direction(Enum):
    """A way out of a scenario, with its key and its label."""

    UP = ("W", "Arriba")
    DOWN = ("S", "Abajo")
    LEFT = ("A", "Izquierda")
    RIGHT = ("D", "Derecha")

    def __init__(self, key: str, label: str) -> None:
        self.key = key
        self.label = label

    @classmethod
    def from_key(cls, key: str) -> Direction:
        """Return the direction bound to a key, ignoring case."""
        wanted = key.upper()
        for direction in cls:
            if direction.key == wanted:
                return direction
        raise ValueError(f"unknown direction key: {key!r}")


@dataclass(frozen=True)
class Item:
    """Something that can be carried: it has a weight and is worth points."""

    name: str
    weight: int
    score: int


@dataclass
class Scenario:
    """One room of the maze."""

    scenario_id: str
    name: str
    description: str
    links: dict[Direction, str]
    final: bool = False
    items: list[Item] = dataclasses.field(default_factory=list)
    neighbours: list[str] = dataclasses.field(default_factory=list)

    def exit(self, direction: Direction) -> str | None:
        """Return the id the direction leads to, or None if it leads nowhere."""
        target = self.links.get(direction)
        if target is None or _leading_int(target) == NO_EXIT:
            return None
        return target

    def exits(self) -> list[Direction]:
        """Return the directions that lead somewhere, in W, S, A, D order."""
        return [direction for direction in Direction if self.exit(direction) is not None]


@dataclass
class Maze:
    """Scenarios indexed by id."""

    scenarios: dict[str, Scenario] = dataclasses.field(default_factory=dict)

    def start(self) -> Scenario:
        """Return the scenario the game begins in."""
        scenario = self.scenarios.get(START_ID)
        if scenario is None:
            raise LookupError("the maze has no starting scenario")
        return scenario

    def get(self, scenario_id: str) -> Scenario | None:
        """Return the scenario with the given id, or None."""
        return self.scenarios.get(scenario_id)

    def neighbours(self, scenario_id: str) -> list[Scenario]:
        """Return the scenarios reachable in one move from the given one."""
        scenario = self.scenarios[scenario_id]
        return [self.scenarios[target] for target in scenario.neighbours]


def parse_items(field: str) -> list[Item]:
    """Parse items written as ``name,weight,score`` separated by ``;``.

    Entries with fewer than three parts are ignored.
    """
    items = []
    for entry in split_string(field, ";"):
        parts = split_string(entry, ",")
        if len(parts) < 3:
            continue
        name, weight, score = parts[:3]
        items.append(Item(name[:ITEM_NAME_LENGTH], _leading_int(weight), _leading_int(score)))
    return items


def load_maze(path: str | PathLike[str]) -> Maze:
    """Read a maze from a CSV file whose first line is a header.

    Rows with fewer than nine fields are skipped; when an id repeats, the
    first row with it is kept.
    """
    scenarios: dict[str, Scenario] = {}
    rows = read_csv(path, ",")
    next(rows, None)
    for fields in rows:
        if len(fields) < _FIELD_COUNT:
            continue
        sid, name, description, items, up, down, left, right, final = fields[:_FIELD_COUNT]
        if sid in scenarios:
            continue
        scenarios[sid] = Scenario(
            scenario_id=sid,
            name=name,
            description=description,
            links={
                Direction.UP: up,
                Direction.DOWN: down,
                Direction.LEFT: left,
                Direction.RIGHT: right,
            },
            final=final == "Si",
            items=parse_items(items),
        )

    for scenario in scenarios.values():
        scenario.neighbours = [
            target
            for target in map(scenario.exit, Direction)
            if target is not None and target in scenarios
        ]
    return Maze(scenarios)