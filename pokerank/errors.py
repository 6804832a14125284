"""
Exceptions raised by card parsing, hand evaluation and table construction.
"""

from collections import Counter
from typing import Optional, Sequence


class PokerankError(Exception):
    """Base class for all pokerank errors."""


class InvalidCard(PokerankError, ValueError):
    """A rank, suit or card identifier outside the standard 52-card deck."""


class ParseCardError(InvalidCard):
    """
    A card string could not be parsed.

    Attributes:
        original_input: The string that was being parsed
        reason: One of "length", "rank" or "suit"
        incorrect_char: The offending character, when there is one
    """

    def __init__(self, original_input: str, reason: str, incorrect_char: Optional[str] = None):
        self.original_input = original_input
        self.reason = reason
        self.incorrect_char = incorrect_char
        if reason == "length":
            message = (f"Error parsing input '{original_input}' as a Card: "
                       f"Found input of length {len(original_input)}, expected 2")
        elif reason == "rank":
            message = (f"Error parsing input '{original_input}' as a Card: "
                       f"Invalid rank character '{incorrect_char}', expected one of [23456789TJQKA]")
        else:
            message = (f"Error parsing input '{original_input}' as a Card: "
                       f"Invalid suit character '{incorrect_char}', expected one of [cdhs]")
        super().__init__(message)


class InvalidHandSize(PokerankError, ValueError):
    """Fewer than 5 or more than 7 cards were passed for evaluation."""

    def __init__(self, size: int):
        self.size = size
        super().__init__(
            f"Cannot evaluate a poker hand of {size} cards, expected between 5 and 7"
        )


class DuplicateCard(PokerankError, ValueError):
    """The same card appears more than once in a hand."""

    def __init__(self, cards: Sequence):
        self.cards = tuple(cards)
        self.duplicates = tuple(card for card, count in Counter(self.cards).items() if count > 1)
        dups = " ".join(str(card) for card in self.duplicates)
        super().__init__(
            "Cannot evaluate a poker hand with a set of cards that are not unique. "
            f"Cards duplicated at least once: {dups}"
        )


class TableConstructionFailure(PokerankError, RuntimeError):
    """
    The lookup table could not be built or loaded.

    This indicates a defect in the table generator or a corrupt static table;
    no evaluation can proceed without a complete table.
    """
