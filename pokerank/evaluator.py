"""
Poker hand evaluation using precomputed lookup tables.

A 5-card hand is reduced to a single table key (see hand_key); 6 and 7 card
hands are scored as the best of their 5-card subsets. Scores run from 1
(royal flush) to 7462 (7-5-4-3-2 offsuit), lower is better.
"""

import functools
import itertools
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .card import Card, CardLike, format_hand, parse_cards, to_card
from .config import EvaluatorConfig
from .errors import DuplicateCard, InvalidHandSize
from .hand_class import Category, HandClass, Ordering, classify, classify_hand, compare
from .tables import HandKey, KeyKind, LookupTable, get_lookup_table
from .tables.constants import BEST_SCORE, MAX_HAND_SIZE, MIN_HAND_SIZE, PRIME_BITS, RANK_BIT_SHIFT

HandLike = Union[str, Iterable[CardLike]]

_SUIT_BITS = 0xF000


@functools.total_ordering
class EvalResult:
    """
    Result of evaluating a hand.

    Results compare by score only: two hands of equal strength are equal
    whatever their cards, and a < b means a is the stronger hand. min() of a
    list of results is therefore the winner.
    """

    __slots__ = ("_score", "_category", "_cards")

    def __init__(self, score: int, cards: Sequence[Card]):
        self._score = score
        self._category = classify(score)
        self._cards = tuple(cards)

    @property
    def score(self) -> int:
        return self._score

    @property
    def category(self) -> Category:
        return self._category

    @property
    def cards(self) -> Tuple[Card, ...]:
        """The five cards making the hand."""
        return self._cards

    def hand_class(self) -> HandClass:
        """Category and defining ranks of the hand."""
        return classify_hand(self._score, self._cards)

    def describe(self) -> str:
        return self.hand_class().describe()

    def is_high_card(self) -> bool:
        return self._category is Category.HIGH_CARD

    def is_pair(self) -> bool:
        return self._category is Category.PAIR

    def is_two_pair(self) -> bool:
        return self._category is Category.TWO_PAIR

    def is_three_of_a_kind(self) -> bool:
        return self._category is Category.THREE_OF_A_KIND

    def is_straight(self) -> bool:
        return self._category is Category.STRAIGHT

    def is_flush(self) -> bool:
        return self._category is Category.FLUSH

    def is_full_house(self) -> bool:
        return self._category is Category.FULL_HOUSE

    def is_four_of_a_kind(self) -> bool:
        return self._category is Category.FOUR_OF_A_KIND

    def is_straight_flush(self) -> bool:
        return self._category is Category.STRAIGHT_FLUSH

    def is_royal_flush(self) -> bool:
        return self._score == BEST_SCORE

    def __eq__(self, other) -> bool:
        if not isinstance(other, EvalResult):
            return NotImplemented
        return self._score == other._score

    def __lt__(self, other) -> bool:
        if not isinstance(other, EvalResult):
            return NotImplemented
        return self._score < other._score

    def __hash__(self) -> int:
        return hash(self._score)

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"EvalResult(score={self._score}, category={self._category.name}, cards='{format_hand(self._cards)}')"


def hand_key(cards: Sequence[Card]) -> HandKey:
    """
    Compute the lookup key of exactly five distinct cards.

    All five cards sharing a suit bit is a flush, keyed by rank mask. Five
    distinct ranks without a flush are keyed by rank mask in the unique map.
    Anything else has a repeated rank and is keyed by the product of the
    rank primes.
    """
    c1, c2, c3, c4, c5 = cards
    rank_mask = (c1 | c2 | c3 | c4 | c5) >> RANK_BIT_SHIFT
    if c1 & c2 & c3 & c4 & c5 & _SUIT_BITS:
        return HandKey(KeyKind.FLUSH, rank_mask)
    if rank_mask.bit_count() == 5:
        return HandKey(KeyKind.UNIQUE, rank_mask)
    product = (c1 & PRIME_BITS) * (c2 & PRIME_BITS) * (c3 & PRIME_BITS) * (c4 & PRIME_BITS) * (c5 & PRIME_BITS)
    return HandKey(KeyKind.MULTIPLES, product)


def resolve_hand(cards: HandLike) -> Tuple[Card, ...]:
    """
    Resolve hand input to a tuple of cards.

    Args:
        cards: A string like "As Kh Qd Jc Ts" or an iterable of cards, card
            strings or deck ids

    Raises:
        InvalidHandSize: for fewer than 5 or more than 7 cards
        DuplicateCard: if a card appears more than once
        InvalidCard: if an identifier is not a card
    """
    if isinstance(cards, str):
        hand = tuple(parse_cards(cards))
    else:
        hand = tuple(to_card(card) for card in cards)
    if not MIN_HAND_SIZE <= len(hand) <= MAX_HAND_SIZE:
        raise InvalidHandSize(len(hand))
    if len(set(hand)) != len(hand):
        raise DuplicateCard(hand)
    return hand


class Evaluator:
    """
    Scores poker hands of 5 to 7 cards.

    Args:
        table: Lookup table to use; by default the shared table of the
            configured source
        config: Evaluator configuration
    """

    def __init__(self, table: Optional[LookupTable] = None, config: Optional[EvaluatorConfig] = None):
        self.config = config if config is not None else EvaluatorConfig()
        if table is None:
            table = get_lookup_table(self.config.table_source, verify=self.config.verify_static_table)
        self.table = table

    def score_five(self, cards: Sequence[Card]) -> int:
        """Score exactly five distinct cards."""
        return self.table.score(hand_key(cards))

    def evaluate(self, cards: HandLike) -> EvalResult:
        """
        Evaluate a hand of 5 to 7 cards.

        Args:
            cards: A string like "As Kh Qd Jc Ts" or an iterable of cards,
                card strings or deck ids

        Returns:
            EvalResult for the best five cards of the hand
        """
        hand = resolve_hand(cards)
        if len(hand) == 5:
            return EvalResult(self.score_five(hand), hand)

        best_score = None
        best_cards = None
        for five in itertools.combinations(hand, 5):
            score = self.score_five(five)
            if best_score is None or score < best_score:
                best_score = score
                best_cards = five
        return EvalResult(best_score, best_cards)

    def evaluate_many(self, hands: Iterable[HandLike]) -> List[EvalResult]:
        """Evaluate several hands."""
        return [self.evaluate(hand) for hand in hands]

    def compare_hands(self, hand1: HandLike, hand2: HandLike) -> Ordering:
        """
        Compare two hands.

        Returns:
            Ordering.LESS if hand1 wins, Ordering.GREATER if hand2 wins,
            Ordering.EQUAL on a tie
        """
        return compare(self.evaluate(hand1).score, self.evaluate(hand2).score)

    def winners(self, hands: Iterable[HandLike]) -> List[int]:
        """Indices of the best hands, more than one on a tie."""
        results = self.evaluate_many(hands)
        if not results:
            return []
        best = min(results)
        return [i for i, result in enumerate(results) if result == best]


@functools.lru_cache(maxsize=None)
def _evaluator_for(config: EvaluatorConfig) -> Evaluator:
    return Evaluator(config=config)


def get_evaluator(config: Optional[EvaluatorConfig] = None) -> Evaluator:
    """Shared evaluator for a configuration (default configuration if None)."""
    return _evaluator_for(config if config is not None else EvaluatorConfig())


def evaluate(cards: HandLike) -> EvalResult:
    """Evaluate a hand of 5 to 7 cards with the default evaluator."""
    return get_evaluator().evaluate(cards)
