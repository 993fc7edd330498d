"""Tile definition, display ordering and full-set construction."""

import random
from enum import IntEnum
from typing import List, Optional, Union


class TileSuit(IntEnum):
    BAMBOO = 0     # 索子
    CHARACTER = 1  # 万子
    DOT = 2        # 筒子
    WIND = 3       # 风牌
    DRAGON = 4     # 三元牌
    FLOWER = 5     # 花牌 (ordering only, never built into a set)

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def from_label(cls, label: str) -> 'TileSuit':
        return cls[label.upper()]


NUMBERED_SUITS = (TileSuit.BAMBOO, TileSuit.CHARACTER, TileSuit.DOT)

WIND_VALUES = ("east", "south", "west", "north")
DRAGON_VALUES = ("red", "green", "white")

COPIES_PER_TILE = 4
TOTAL_TILES = (len(NUMBERED_SUITS) * 9 + len(WIND_VALUES) + len(DRAGON_VALUES)) * COPIES_PER_TILE

TileValue = Union[int, str]


class Tile:
    """Immutable tile. Identity is the string id; suit/value is the face."""
    __slots__ = ('_id', '_suit', '_value')

    def __init__(self, tile_id: str, suit: TileSuit, value: Optional[TileValue]):
        suit = TileSuit(suit)
        if suit in NUMBERED_SUITS:
            if not isinstance(value, int) or not (1 <= value <= 9):
                raise ValueError(f"{suit.label} value must be 1..9, got {value!r}")
        elif suit == TileSuit.WIND:
            if value not in WIND_VALUES:
                raise ValueError(f"wind value must be one of {WIND_VALUES}, got {value!r}")
        elif suit == TileSuit.DRAGON:
            if value not in DRAGON_VALUES:
                raise ValueError(f"dragon value must be one of {DRAGON_VALUES}, got {value!r}")
        object.__setattr__(self, '_id', tile_id)
        object.__setattr__(self, '_suit', suit)
        object.__setattr__(self, '_value', value)

    def __setattr__(self, name, value):
        raise AttributeError("Tile is immutable")

    @property
    def id(self) -> str:
        return self._id

    @property
    def suit(self) -> TileSuit:
        return self._suit

    @property
    def value(self) -> Optional[TileValue]:
        return self._value

    @property
    def key(self) -> tuple:
        """Face key shared by all copies of the same tile."""
        return (self._suit, self._value)

    @property
    def is_number_tile(self) -> bool:
        return self._suit in NUMBERED_SUITS

    @property
    def name(self) -> str:
        return f"{self._suit.label}-{self._value}"

    def __repr__(self):
        return f"Tile({self._id})"

    def __eq__(self, other):
        if isinstance(other, Tile):
            return self._id == other._id
        return NotImplemented

    def __hash__(self):
        return hash(self._id)

    def __lt__(self, other):
        if isinstance(other, Tile):
            return compare_tiles(self, other) < 0
        return NotImplemented


def compare_tiles(a: Tile, b: Tile) -> int:
    """Three-way comparison used to keep hands grouped for display.

    Numbered values compare numerically; anything else compares by its text.
    Copies of the same face compare equal.
    """
    if a.suit != b.suit:
        return int(a.suit) - int(b.suit)
    if isinstance(a.value, int) and isinstance(b.value, int):
        return a.value - b.value
    sa, sb = str(a.value), str(b.value)
    return (sa > sb) - (sa < sb)


def sort_tiles(tiles: List[Tile]) -> List[Tile]:
    """Return a new list in display order (stable for copies)."""
    return sorted(tiles)


def build_tile_set() -> List[Tile]:
    """Build the 136 tiles in fixed enumeration order, unshuffled."""
    tiles = []
    counter = 0
    for suit in NUMBERED_SUITS:
        for value in range(1, 10):
            for _ in range(COPIES_PER_TILE):
                tiles.append(Tile(f"{suit.label}-{value}-{counter}", suit, value))
                counter += 1
    for wind in WIND_VALUES:
        for _ in range(COPIES_PER_TILE):
            tiles.append(Tile(f"wind-{wind}-{counter}", TileSuit.WIND, wind))
            counter += 1
    for dragon in DRAGON_VALUES:
        for _ in range(COPIES_PER_TILE):
            tiles.append(Tile(f"dragon-{dragon}-{counter}", TileSuit.DRAGON, dragon))
            counter += 1
    return tiles


def build_shuffled_deck(rng: Optional[random.Random] = None) -> List[Tile]:
    """Build the full set and shuffle it uniformly."""
    tiles = build_tile_set()
    (rng or random).shuffle(tiles)
    return tiles


def make_tiles_from_string(s: str) -> List[Tile]:
    """Parse a shorthand like '123b456c789d EE RR' into tiles.

    Digits followed by b/c/d are bamboo/character/dot. Honors are single
    letters: E S W N for winds, R G H for red/green/white ('H' as in the
    white "haku" tile). Each parsed tile gets a fresh id so duplicates stay
    distinct within the returned list.
    """
    suit_chars = {'b': TileSuit.BAMBOO, 'c': TileSuit.CHARACTER, 'd': TileSuit.DOT}
    honor_chars = {
        'E': (TileSuit.WIND, "east"), 'S': (TileSuit.WIND, "south"),
        'W': (TileSuit.WIND, "west"), 'N': (TileSuit.WIND, "north"),
        'R': (TileSuit.DRAGON, "red"), 'G': (TileSuit.DRAGON, "green"),
        'H': (TileSuit.DRAGON, "white"),
    }
    tiles = []
    numbers = []
    for ch in s:
        if ch.isdigit():
            numbers.append(int(ch))
        elif ch in suit_chars:
            suit = suit_chars[ch]
            for n in numbers:
                tiles.append(Tile(f"{suit.label}-{n}-t{len(tiles)}", suit, n))
            numbers = []
        elif ch in honor_chars:
            suit, value = honor_chars[ch]
            tiles.append(Tile(f"{suit.label}-{value}-t{len(tiles)}", suit, value))
    return tiles
