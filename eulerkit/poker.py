"""Ranking and comparing five-card poker hands."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

_FACES = {"T": 10, "J": 11, "Q": 12, "K": 13, "A": 14}


@dataclass(frozen=True)
class Card:
    """A playing card: value 2 to 14 (ace high) and a suit letter."""

    value: int
    suit: str

    @classmethod
    def parse(cls, text: str) -> Card:
        """Read a card such as ``"TH"`` or ``"5C"``."""
        if len(text) != 2:
            raise ValueError(f"invalid card {text!r}")
        face, suit = text[0], text[1]
        if face.isdigit():
            value = int(face)
        elif face in _FACES:
            value = _FACES[face]
        else:
            raise ValueError(f"invalid card value in {text!r}")
        return cls(value, suit)


def _evaluate(cards: Sequence[Card]) -> tuple[tuple[int, ...], list[int]]:
    if len(cards) != 5:
        raise ValueError("a hand holds exactly five cards")
    ordered = sorted(cards, key=lambda card: card.value)
    values = [card.value for card in ordered]
    suits = {card.suit for card in ordered}
    consecutive = True
    for i in range(1, 5):
        if consecutive and values[i] != values[i - 1] + 1:
            if i == 4 and values[i] == 14 and values[0] == 2:
                values[i] = 1
            else:
                consecutive = False
    counts = Counter(values)
    pairs = sorted(v for v, c in counts.items() if c == 2)
    three = max((v for v, c in counts.items() if c == 3), default=0)
    four = max((v for v, c in counts.items() if c == 4), default=0)
    if consecutive:
        if len(suits) == 1:
            return ((1,) if values[0] == 10 else (2,)), values
        return (6,), values
    if four:
        return (3, four), values
    if three:
        if len(pairs) == 1:
            return (4, three, pairs[0]), values
        if len(suits) > 1:
            return (7, three), values
    if len(suits) == 1:
        return (5,), values
    if len(pairs) == 2:
        return (8, max(pairs), min(pairs)), values
    if len(pairs) == 1:
        return (9, pairs[0]), values
    return (10, values[4]), values


def hand_rank(cards: Sequence[Card]) -> tuple[int, ...]:
    """Category (1 royal flush to 10 high card) followed by its deciding values."""
    return _evaluate(cards)[0]


def winner(hand1: Sequence[Card], hand2: Sequence[Card]) -> int:
    """1 or 2 for the winning hand, 0 if the two hands tie."""
    rank1, values1 = _evaluate(hand1)
    rank2, values2 = _evaluate(hand2)
    if rank1[0] != rank2[0]:
        return 1 if rank1[0] < rank2[0] else 2
    for a, b in zip(rank1[1:], rank2[1:]):
        if a != b:
            return 1 if a > b else 2
    for a, b in zip(reversed(values1), reversed(values2)):
        if a != b:
            return 1 if a > b else 2
    return 0