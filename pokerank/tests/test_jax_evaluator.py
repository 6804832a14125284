"""
Unit tests for the JAX batch evaluator.

Scores must match the Python evaluator exactly.
"""

import jax
import jax.numpy as jnp
import pytest

from pokerank.card import Card
from pokerank.errors import InvalidHandSize
from pokerank.evaluator import evaluate
from pokerank.hand_class import Category, classify
from pokerank.jax_evaluator import (
    CARD_INTS, JaxTables, batch_evaluate, evaluate_hand_jax, hand_vs_hand, jax_tables
)
from pokerank.tables import load_static_table


@pytest.fixture(scope="module")
def tables() -> JaxTables:
    return jax_tables()


def cards_from_string(cards_str: str) -> jnp.ndarray:
    """Convert card string like 'As Kh Qd Jc Ts' to card ID array."""
    return jnp.array([Card.parse(card).id for card in cards_str.split()], dtype=jnp.int32)


def random_hands(key: jax.Array, num_hands: int, num_cards: int) -> jnp.ndarray:
    """Generate random hands of distinct cards."""
    keys = jax.random.split(key, num_hands)
    return jax.vmap(lambda k: jax.random.choice(k, 52, shape=(num_cards,), replace=False))(keys)


class TestTables:
    """Test conversion of the lookup table to arrays."""

    def test_shapes(self, tables):
        """Test array shapes and types."""
        assert tables.flush_scores.shape == (8192,)
        assert tables.unique_scores.shape == (8192,)
        assert tables.multiples_keys.shape == (4888,)
        assert tables.multiples_scores.shape == (4888,)
        assert tables.flush_scores.dtype == jnp.int32

    def test_multiples_sorted(self, tables):
        """Test that prime products are sorted for searchsorted."""
        assert bool(jnp.all(jnp.diff(tables.multiples_keys) > 0))

    def test_static_source(self, tables):
        """Test that the static table gives the same arrays."""
        static = jax_tables(load_static_table())
        for dynamic_array, static_array in zip(tables, static):
            assert bool(jnp.array_equal(dynamic_array, static_array))

    def test_card_ints(self):
        """Test that packed cards are indexed by deck id."""
        assert int(CARD_INTS[51]) == int(Card.parse("As"))
        assert int(CARD_INTS[0]) == int(Card.parse("2c"))


class TestHandEvaluation:
    """Test single hand evaluation."""

    @pytest.mark.parametrize("hand,category", [
        ("As Ks Qs Js Ts", Category.STRAIGHT_FLUSH),
        ("5s 4s 3s 2s As", Category.STRAIGHT_FLUSH),
        ("As Ah Ad Ac Kh", Category.FOUR_OF_A_KIND),
        ("3s 3h 3d 3c 4h", Category.FOUR_OF_A_KIND),
        ("As Ah Ad Kc Kh", Category.FULL_HOUSE),
        ("As Ks 9s 7s 2s", Category.FLUSH),
        ("5h 4d 3s 2c Ah", Category.STRAIGHT),
        ("7s 7h 7d Ac Kh", Category.THREE_OF_A_KIND),
        ("8s 8h 3d 3c 7h", Category.TWO_PAIR),
        ("7s 7h Ad Qc Jh", Category.PAIR),
        ("Th 9d 6s 4c 2h", Category.HIGH_CARD),
    ])
    def test_categories(self, tables, hand, category):
        """Test one hand of each category."""
        score = int(evaluate_hand_jax(tables, cards_from_string(hand)))
        assert classify(score) is category
        assert score == evaluate(hand).score

    def test_royal_flush(self, tables):
        """Test royal flush evaluation."""
        assert int(evaluate_hand_jax(tables, cards_from_string("As Ks Qs Js Ts"))) == 1

    def test_seven_card_best_hand(self, tables):
        """Test that best 5-card hand is found from 7."""
        hand = cards_from_string("As Ah Ad Kc Kh 2s 3d")
        score = int(evaluate_hand_jax(tables, hand))
        assert classify(score) is Category.FULL_HOUSE
        assert score == evaluate("As Ah Ad Kc Kh 2s 3d").score

    def test_invalid_hand_size(self, tables):
        """Test that only 5 to 7 cards are accepted."""
        with pytest.raises(InvalidHandSize):
            evaluate_hand_jax(tables, cards_from_string("As Ks Qs Js"))


class TestBatchEvaluation:
    """Test vectorized evaluation."""

    def test_batch_evaluation(self, tables):
        """Test evaluating multiple hands at once."""
        hands = jnp.stack([
            cards_from_string("As Ah Ad Kc Kh"),  # Full house
            cards_from_string("As Ks 9s 7s 2s"),  # Flush
            cards_from_string("As Ah Kd Qc Jh"),  # Pair
        ])

        scores = batch_evaluate(tables, hands)
        assert len(scores) == 3

        assert classify(int(scores[0])) is Category.FULL_HOUSE
        assert classify(int(scores[1])) is Category.FLUSH
        assert classify(int(scores[2])) is Category.PAIR

        # Full house should be strongest
        assert scores[0] < scores[1] < scores[2]

    @pytest.mark.parametrize("num_cards", [5, 6, 7])
    def test_matches_python_evaluator(self, tables, num_cards):
        """Test random hands against the Python evaluator."""
        hands = random_hands(jax.random.PRNGKey(num_cards), 300, num_cards)
        scores = batch_evaluate(tables, hands)
        for hand, score in zip(hands.tolist(), scores.tolist()):
            assert score == evaluate(hand).score


class TestHandComparison:
    """Test hand vs hand comparisons."""

    def test_same_class_comparison(self, tables):
        """Test comparison within same hand class."""
        # Ace high flush vs King high flush
        result = hand_vs_hand(tables, cards_from_string("As Ks 9s 7s 2s"), cards_from_string("Kh Qh 9h 7h 2h"))
        assert result > 0  # hand1 should win

    def test_different_class_comparison(self, tables):
        """Test comparison between different hand classes."""
        # Full house vs flush
        result = hand_vs_hand(tables, cards_from_string("Ad Ah Ac Kc Kh"), cards_from_string("As Ks 9s 7s 2s"))
        assert result > 0
        result = hand_vs_hand(tables, cards_from_string("As Ks 9s 7s 2s"), cards_from_string("Ad Ah Ac Kc Kh"))
        assert result < 0

    def test_tie_hands(self, tables):
        """Test tied hands."""
        result = hand_vs_hand(tables, cards_from_string("As Kh Qd Jc Ts"), cards_from_string("Ad Kc Qh Js Th"))
        assert result == 0
