"""
Hand categories, ordering of scores and human-readable descriptions.

Scores are ranks: 1 is the best possible hand (royal flush) and 7462 the
worst (7-5-4-3-2 offsuit), so a lower score always wins.
"""

import bisect
from collections import Counter
from enum import IntEnum
from typing import TYPE_CHECKING, Iterable, NamedTuple, Optional, Union

from .card import CardLike, Rank, to_card
from .tables.constants import (
    BEST_SCORE, STRAIGHTS, WORST_FLUSH, WORST_FOUR_OF_A_KIND, WORST_FULL_HOUSE,
    WORST_HIGH_CARD, WORST_PAIR, WORST_SCORE, WORST_STRAIGHT, WORST_STRAIGHT_FLUSH,
    WORST_THREE_OF_A_KIND, WORST_TWO_PAIR
)

if TYPE_CHECKING:
    from .evaluator import EvalResult


class Category(IntEnum):
    """Hand category, best first."""

    STRAIGHT_FLUSH = 1
    FOUR_OF_A_KIND = 2
    FULL_HOUSE = 3
    FLUSH = 4
    STRAIGHT = 5
    THREE_OF_A_KIND = 6
    TWO_PAIR = 7
    PAIR = 8
    HIGH_CARD = 9

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def best_score(self) -> int:
        return BEST_SCORE if self is Category.STRAIGHT_FLUSH else _WORST_SCORES[self - 2] + 1

    @property
    def worst_score(self) -> int:
        return _WORST_SCORES[self - 1]

    @property
    def score_range(self) -> range:
        """Scores belonging to this category, best first."""
        return range(self.best_score, self.worst_score + 1)

    def __str__(self) -> str:
        return self.display_name


_DISPLAY_NAMES = {
    Category.STRAIGHT_FLUSH: "Straight Flush",
    Category.FOUR_OF_A_KIND: "Four of a Kind",
    Category.FULL_HOUSE: "Full House",
    Category.FLUSH: "Flush",
    Category.STRAIGHT: "Straight",
    Category.THREE_OF_A_KIND: "Three of a Kind",
    Category.TWO_PAIR: "Two Pair",
    Category.PAIR: "Pair",
    Category.HIGH_CARD: "High Card",
}

# Indexed by category value - 1
_WORST_SCORES = (
    WORST_STRAIGHT_FLUSH, WORST_FOUR_OF_A_KIND, WORST_FULL_HOUSE, WORST_FLUSH,
    WORST_STRAIGHT, WORST_THREE_OF_A_KIND, WORST_TWO_PAIR, WORST_PAIR, WORST_HIGH_CARD,
)


class Ordering(IntEnum):
    """Result of comparing two scores; LESS means the first hand is stronger."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def _check_score(score: int) -> None:
    if isinstance(score, bool) or not isinstance(score, int) or not BEST_SCORE <= score <= WORST_SCORE:
        raise ValueError(f"Invalid hand score {score!r}, expected an integer from {BEST_SCORE} to {WORST_SCORE}")


def classify(score: int) -> Category:
    """
    Get the hand category of a score.

    Args:
        score: Hand score from the evaluator (1-7462)

    Returns:
        The Category whose score range contains score

    Raises:
        ValueError: if score is outside [1, 7462]
    """
    _check_score(score)
    return Category(bisect.bisect_left(_WORST_SCORES, score) + 1)


def compare(a: Union[int, "EvalResult"], b: Union[int, "EvalResult"]) -> Ordering:
    """
    Compare two hands by score; LESS means a beats b.

    Args:
        a: A score or an EvalResult
        b: A score or an EvalResult
    """
    a = getattr(a, "score", a)
    b = getattr(b, "score", b)
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


class HandClass(NamedTuple):
    """
    Structured breakdown of a hand.

    high_rank is set for the hands ranked by their top card (straight flush,
    flush, straight and high card); the other fields are set for the hands
    built from repeated ranks. first_pair is the higher of two pairs.
    """

    category: Category
    high_rank: Optional[Rank] = None
    quads: Optional[Rank] = None
    trips: Optional[Rank] = None
    pair: Optional[Rank] = None
    first_pair: Optional[Rank] = None
    second_pair: Optional[Rank] = None

    def is_royal_flush(self) -> bool:
        return self.category is Category.STRAIGHT_FLUSH and self.high_rank is Rank.ACE

    def describe(self) -> str:
        """Describe the hand in words, e.g. "Full house, jacks over fours"."""
        category = self.category
        if category is Category.STRAIGHT_FLUSH:
            if self.is_royal_flush():
                return "Royal flush"
            return f"Straight flush, {self.high_rank.word}-high"
        if category is Category.FOUR_OF_A_KIND:
            return f"Four of a kind, {self.quads.plural}"
        if category is Category.FULL_HOUSE:
            return f"Full house, {self.trips.plural} over {self.pair.plural}"
        if category is Category.FLUSH:
            return f"Flush, {self.high_rank.word}-high"
        if category is Category.STRAIGHT:
            return f"Straight, {self.high_rank.word}-high"
        if category is Category.THREE_OF_A_KIND:
            return f"Three of a kind, {self.trips.plural}"
        if category is Category.TWO_PAIR:
            return f"Two pair, {self.first_pair.plural} and {self.second_pair.plural}"
        if category is Category.PAIR:
            return f"Pair, {self.pair.plural}"
        return f"High card, {self.high_rank.word}"

    def __str__(self) -> str:
        return self.describe()


def _high_rank(ranks) -> Rank:
    rank_bits = 0
    for rank in ranks:
        rank_bits |= 1 << rank.ordinal
    # A-2-3-4-5 plays as a five-high straight
    if rank_bits == STRAIGHTS[-1]:
        return Rank.FIVE
    return max(ranks)


def classify_hand(score: int, cards: Iterable[CardLike]) -> HandClass:
    """
    Break a hand down into its category and defining ranks.

    Args:
        score: Score of the hand
        cards: The five cards that make the hand

    Returns:
        HandClass for the hand

    Raises:
        ValueError: if score is outside [1, 7462]
    """
    category = classify(score)
    counts = Counter(to_card(card).rank for card in cards)
    # Most repeated rank first, higher rank breaking ties
    grouped = sorted(counts, key=lambda rank: (counts[rank], rank), reverse=True)

    if category in (Category.STRAIGHT_FLUSH, Category.STRAIGHT):
        return HandClass(category, high_rank=_high_rank(grouped))
    if category in (Category.FLUSH, Category.HIGH_CARD):
        return HandClass(category, high_rank=grouped[0])
    if category is Category.FOUR_OF_A_KIND:
        return HandClass(category, quads=grouped[0])
    if category is Category.FULL_HOUSE:
        return HandClass(category, trips=grouped[0], pair=grouped[1])
    if category is Category.THREE_OF_A_KIND:
        return HandClass(category, trips=grouped[0])
    if category is Category.TWO_PAIR:
        return HandClass(category, first_pair=grouped[0], second_pair=grouped[1])
    return HandClass(category, pair=grouped[0])


def describe(score: int, cards: Iterable[CardLike]) -> str:
    """Describe a hand in words, e.g. "Full house, jacks over fours"."""
    return classify_hand(score, cards).describe()
