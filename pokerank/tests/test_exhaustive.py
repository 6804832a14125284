"""
Exhaustive check of every 5-card hand of a 52-card deck.
"""

import itertools
from collections import Counter

import pytest

from pokerank.card import generate_deck
from pokerank.evaluator import Evaluator
from pokerank.hand_class import Category, classify


@pytest.fixture(scope="module")
def score_counts():
    evaluator = Evaluator()
    score_five = evaluator.score_five
    return Counter(score_five(five) for five in itertools.combinations(tuple(generate_deck()), 5))


def test_number_of_hands(score_counts):
    """Test that all C(52, 5) hands were scored."""
    assert sum(score_counts.values()) == 2598960


def test_every_score_appears(score_counts):
    """Test that all 7462 hand classes occur."""
    assert sorted(score_counts) == list(range(1, 7463))


def test_hand_classes_per_category(score_counts):
    """Test the number of distinct scores in each category."""
    classes = Counter(classify(score) for score in score_counts)
    assert [classes[category] for category in Category] == [10, 156, 156, 1277, 10, 858, 858, 2860, 1277]


def test_hands_per_category(score_counts):
    """Test the number of hands in each category."""
    hands = Counter()
    for score, count in score_counts.items():
        hands[classify(score)] += count
    assert hands == {
        Category.STRAIGHT_FLUSH: 40,
        Category.FOUR_OF_A_KIND: 624,
        Category.FULL_HOUSE: 3744,
        Category.FLUSH: 5108,
        Category.STRAIGHT: 10200,
        Category.THREE_OF_A_KIND: 54912,
        Category.TWO_PAIR: 123552,
        Category.PAIR: 1098240,
        Category.HIGH_CARD: 1302540,
    }


def test_single_class_counts(score_counts):
    """Test how many hands share the best and the worst score."""
    # Royal flush: one per suit; 7-5-4-3-2 offsuit: 4**5 - 4
    assert score_counts[1] == 4
    assert score_counts[7462] == 1020
