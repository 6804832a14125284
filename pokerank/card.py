"""
Card representation and conversion utilities for poker hand evaluation.

Each card is a single integer carrying every facet the evaluator needs:

    bits 16-28  rank bit      (1 << rank ordinal), used to build rank masks
    bits 12-15  suit bit      (1 << suit index), used to detect flushes
    bits  8-11  rank ordinal  0=2, 1=3, ..., 12=A
    bits  0-7   rank prime    2, 3, 5, ..., 41, used for prime products

Cards also have a deck id in [0, 52): suit_index * 13 + rank_ordinal, the
representation used by array-based evaluation.
"""

import operator
from enum import IntEnum
from typing import Iterable, Iterator, List, Tuple, Union

from .errors import InvalidCard, ParseCardError
from .tables.constants import (
    NUM_RANKS, PRIMES, PRIME_BITS, RANK_BIT_SHIFT, RANK_MASK_BITS,
    RANK_ORDINAL_SHIFT, SUIT_BIT_SHIFT, SUIT_MASK_BITS
)

RANK_CHARS = "23456789TJQKA"
SUIT_CHARS = "cdhs"
PRETTY_SUIT_CHARS = "♣♦♥♠"

_RANK_WORDS = ("two", "three", "four", "five", "six", "seven", "eight",
               "nine", "ten", "jack", "queen", "king", "ace")
_RANK_PLURALS = ("twos", "threes", "fours", "fives", "sixes", "sevens", "eights",
                 "nines", "tens", "jacks", "queens", "kings", "aces")


class Rank(IntEnum):
    """Card rank, valued by its face value (ace high)."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def ordinal(self) -> int:
        return self.value - 2

    @property
    def char(self) -> str:
        return RANK_CHARS[self.ordinal]

    @property
    def word(self) -> str:
        return _RANK_WORDS[self.ordinal]

    @property
    def plural(self) -> str:
        return _RANK_PLURALS[self.ordinal]

    @property
    def prime(self) -> int:
        return PRIMES[self.ordinal]

    def __str__(self) -> str:
        return self.char


class Suit(IntEnum):
    """Card suit, valued by its index in the deck id layout."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    @property
    def bit(self) -> int:
        return 1 << self.value

    @property
    def char(self) -> str:
        return SUIT_CHARS[self.value]

    @property
    def pretty_char(self) -> str:
        return PRETTY_SUIT_CHARS[self.value]

    def __str__(self) -> str:
        return self.pretty_char


_RANKS = tuple(Rank)
_SUITS = tuple(Suit)
_SUIT_BY_BIT = {suit.bit: suit for suit in _SUITS}
_SUIT_BY_CHAR = {suit.char: suit for suit in _SUITS}
_SUIT_BY_CHAR.update({suit.pretty_char: suit for suit in _SUITS})


def _pack(rank_ordinal: int, suit_index: int) -> int:
    return ((1 << rank_ordinal) << RANK_BIT_SHIFT
            | (1 << suit_index) << SUIT_BIT_SHIFT
            | rank_ordinal << RANK_ORDINAL_SHIFT
            | PRIMES[rank_ordinal])


def _coerce_rank(rank) -> Rank:
    if isinstance(rank, Rank):
        return rank
    if isinstance(rank, int) and not isinstance(rank, bool):
        try:
            return Rank(rank)
        except ValueError:
            pass
    raise InvalidCard(f"Invalid rank {rank!r}, expected an integer from 2 to 14")


def _coerce_suit(suit) -> Suit:
    if isinstance(suit, Suit):
        return suit
    if isinstance(suit, str):
        found = _SUIT_BY_CHAR.get(suit)
        if found is not None:
            return found
    elif isinstance(suit, int) and not isinstance(suit, bool):
        try:
            return Suit(suit)
        except ValueError:
            pass
    raise InvalidCard(f"Invalid suit {suit!r}, expected a Suit, an index from 0 to 3 or one of 'cdhs'")


class Card(int):
    """
    An immutable playing card.

    Cards are interned: Card(Rank.ACE, Suit.SPADES) always returns the same
    object, and two cards are equal iff their rank and suit are equal.
    """

    __slots__ = ()

    def __new__(cls, rank, suit):
        rank = _coerce_rank(rank)
        suit = _coerce_suit(suit)
        return _CARDS_BY_ID[suit.value * NUM_RANKS + rank.ordinal]

    def __getnewargs__(self):
        return (self.rank, self.suit)

    @classmethod
    def new(cls, rank, suit) -> "Card":
        """Encode a (rank, suit) pair, raising InvalidCard outside the deck."""
        return cls(rank, suit)

    @classmethod
    def from_id(cls, card_id: int) -> "Card":
        """
        Get the card with the given deck id.

        Args:
            card_id: Card ID (0-51), any integer type including numpy and
                jax integer scalars

        Returns:
            The card
        """
        if isinstance(card_id, bool):
            raise InvalidCard(f"Invalid card id {card_id!r}, expected an integer from 0 to 51")
        try:
            card_id = operator.index(card_id)
        except TypeError:
            raise InvalidCard(f"Invalid card id {card_id!r}, expected an integer from 0 to 51") from None
        if not 0 <= card_id < 52:
            raise InvalidCard(f"Invalid card id {card_id!r}, expected an integer from 0 to 51")
        return _CARDS_BY_ID[card_id]

    @classmethod
    def parse(cls, card_str: str) -> "Card":
        """
        Parse card string to a card.

        Args:
            card_str: String like "As" or "2c"

        Returns:
            The card

        Raises:
            ParseCardError: if the string is not a rank character followed
                by a suit character
        """
        if not isinstance(card_str, str) or len(card_str) != 2:
            raise ParseCardError(str(card_str), "length")
        rank_char, suit_char = card_str
        rank_ordinal = RANK_CHARS.find(rank_char)
        if rank_ordinal < 0:
            raise ParseCardError(card_str, "rank", rank_char)
        suit = _SUIT_BY_CHAR.get(suit_char)
        if suit is None:
            raise ParseCardError(card_str, "suit", suit_char)
        return _CARDS_BY_ID[suit.value * NUM_RANKS + rank_ordinal]

    @property
    def rank_bit(self) -> int:
        return (self >> RANK_BIT_SHIFT) & RANK_MASK_BITS

    @property
    def suit_bit(self) -> int:
        return (self >> SUIT_BIT_SHIFT) & SUIT_MASK_BITS

    @property
    def rank_ordinal(self) -> int:
        return (self >> RANK_ORDINAL_SHIFT) & 0xF

    @property
    def prime(self) -> int:
        return self & PRIME_BITS

    @property
    def rank(self) -> Rank:
        return _RANKS[self.rank_ordinal]

    @property
    def suit(self) -> Suit:
        return _SUIT_BY_BIT[self.suit_bit]

    @property
    def id(self) -> int:
        return self.suit.value * NUM_RANKS + self.rank_ordinal

    @property
    def value(self) -> int:
        """The packed integer encoding."""
        return int(self)

    def pretty(self) -> str:
        """Format as "[ A♠ ]"."""
        return f"[ {self.rank.char}{self.suit.pretty_char} ]"

    def __str__(self) -> str:
        return self.rank.char + self.suit.char

    def __repr__(self) -> str:
        return f"Card('{self}')"


_CARDS_BY_ID: Tuple[Card, ...] = tuple(
    int.__new__(Card, _pack(rank_ordinal, suit_index))
    for suit_index in range(len(_SUITS))
    for rank_ordinal in range(NUM_RANKS)
)


CardLike = Union[Card, str, int]


def encode(rank, suit) -> Card:
    """Encode a (rank, suit) pair as a Card."""
    return Card(rank, suit)


def card_to_id(suit: int, rank: int) -> int:
    """
    Convert suit and rank to card ID.

    Args:
        suit: 0=clubs, 1=diamonds, 2=hearts, 3=spades
        rank: 0=2, 1=3, ..., 11=K, 12=A

    Returns:
        Card ID (0-51)
    """
    return suit * NUM_RANKS + rank


def id_to_card(card_id: int) -> Tuple[int, int]:
    """
    Convert card ID to suit and rank.

    Args:
        card_id: Card ID (0-51)

    Returns:
        Tuple of (suit, rank)
    """
    return card_id // NUM_RANKS, card_id % NUM_RANKS


def to_card(card: CardLike) -> Card:
    """
    Resolve a card identifier to a Card.

    Accepts a Card, a card string like "As", or a deck id (0-51).
    """
    if isinstance(card, Card):
        return card
    if isinstance(card, str):
        return Card.parse(card)
    return Card.from_id(card)


def parse_cards(cards_str: str) -> List[Card]:
    """Convert card string like 'As Kh Qd Jc Ts' to a list of cards."""
    return [Card.parse(card) for card in cards_str.split()]


def format_hand(cards: Iterable[CardLike]) -> str:
    """
    Format cards as readable string.

    Args:
        cards: Cards or card identifiers

    Returns:
        String like "As Kh Qd Jc Ts"
    """
    return " ".join(str(to_card(card)) for card in cards)


def generate_deck() -> Iterator[Card]:
    """Yield every card of a standard 52-card deck once, in deck id order."""
    return iter(_CARDS_BY_ID)
