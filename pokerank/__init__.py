"""
Fast poker hand evaluation library using precomputed lookup tables.

Ranks any hand of 5 to 7 cards with a score from 1 (royal flush) to 7462
(7-5-4-3-2 offsuit); lower scores are stronger hands.
"""

from .card import Card, Rank, Suit, card_to_id, format_hand, generate_deck, id_to_card, parse_cards
from .config import EvaluatorConfig
from .errors import (
    DuplicateCard, InvalidCard, InvalidHandSize, ParseCardError, PokerankError,
    TableConstructionFailure
)
from .evaluator import EvalResult, Evaluator, evaluate, get_evaluator
from .hand_class import Category, HandClass, Ordering, classify, classify_hand, compare, describe

__all__ = [
    'Card',
    'Rank',
    'Suit',
    'card_to_id',
    'id_to_card',
    'parse_cards',
    'format_hand',
    'generate_deck',
    'EvaluatorConfig',
    'PokerankError',
    'InvalidCard',
    'ParseCardError',
    'InvalidHandSize',
    'DuplicateCard',
    'TableConstructionFailure',
    'EvalResult',
    'Evaluator',
    'evaluate',
    'get_evaluator',
    'Category',
    'HandClass',
    'Ordering',
    'classify',
    'classify_hand',
    'compare',
    'describe',
]
