"""
JAX-compatible batch hand evaluation.

Evaluates hands given as arrays of deck ids (0-51) with the same lookup
tables as the Python evaluator, flattened into dense arrays so that
evaluation is branch-free and can be jitted and vmapped. Scores are
identical to Evaluator.evaluate: 1 is the best hand, 7462 the worst.
"""

import functools
import itertools
from typing import NamedTuple, Optional

import jax
import jax.numpy as jnp

from .card import generate_deck
from .errors import InvalidHandSize
from .tables import LookupTable, get_lookup_table
from .tables.constants import (
    MAX_HAND_SIZE, MIN_HAND_SIZE, PRIME_BITS, RANK_BIT_SHIFT, RANK_MASK_BITS
)

# Packed card integers indexed by deck id
CARD_INTS = jnp.array([int(card) for card in generate_deck()], dtype=jnp.int32)

# Indices of every 5-card subset of a hand, per hand size
FIVE_CARD_SUBSETS = {
    size: jnp.array(list(itertools.combinations(range(size), 5)), dtype=jnp.int32)
    for size in range(MIN_HAND_SIZE, MAX_HAND_SIZE + 1)
}

_SUIT_BITS = 0xF000
_NUM_RANK_MASK_SLOTS = RANK_MASK_BITS + 1


class JaxTables(NamedTuple):
    """Lookup table as dense arrays."""

    flush_scores: jnp.ndarray  # rank mask -> score, 0 for unused masks
    unique_scores: jnp.ndarray  # rank mask -> score, 0 for unused masks
    multiples_keys: jnp.ndarray  # prime products, ascending
    multiples_scores: jnp.ndarray  # score of each prime product


def jax_tables(table: Optional[LookupTable] = None) -> JaxTables:
    """
    Convert a lookup table to dense arrays.

    Args:
        table: Lookup table, the shared dynamic table if None

    Returns:
        JaxTables for use with the functions of this module
    """
    if table is None:
        table = get_lookup_table()

    flush_scores = [0] * _NUM_RANK_MASK_SLOTS
    for rank_mask, score in table.flush.items():
        flush_scores[rank_mask] = score
    unique_scores = [0] * _NUM_RANK_MASK_SLOTS
    for rank_mask, score in table.unique.items():
        unique_scores[rank_mask] = score
    multiples = sorted(table.multiples.items())

    return JaxTables(
        flush_scores=jnp.array(flush_scores, dtype=jnp.int32),
        unique_scores=jnp.array(unique_scores, dtype=jnp.int32),
        multiples_keys=jnp.array([key for key, _ in multiples], dtype=jnp.int32),
        multiples_scores=jnp.array([score for _, score in multiples], dtype=jnp.int32),
    )


def _score_five(tables: JaxTables, packed: jnp.ndarray) -> jnp.ndarray:
    """Score five packed card integers."""
    c0, c1, c2, c3, c4 = packed[0], packed[1], packed[2], packed[3], packed[4]
    rank_mask = ((c0 | c1 | c2 | c3 | c4) >> RANK_BIT_SHIFT) & RANK_MASK_BITS
    is_flush = (c0 & c1 & c2 & c3 & c4 & _SUIT_BITS) != 0
    is_unique = jnp.bitwise_count(rank_mask) == 5

    # Largest product is four aces with a king, well within int32
    product = (c0 & PRIME_BITS) * (c1 & PRIME_BITS) * (c2 & PRIME_BITS) * (c3 & PRIME_BITS) * (c4 & PRIME_BITS)
    index = jnp.searchsorted(tables.multiples_keys, product)
    index = jnp.clip(index, 0, tables.multiples_keys.shape[0] - 1)
    multiples_score = tables.multiples_scores[index]

    return jnp.where(
        is_flush,
        tables.flush_scores[rank_mask],
        jnp.where(is_unique, tables.unique_scores[rank_mask], multiples_score),
    )


@jax.jit
def evaluate_hand_jax(tables: JaxTables, card_ids: jnp.ndarray) -> jnp.ndarray:
    """
    Evaluate one hand.

    Ids are not checked under jit: out-of-range ids are wrapped or clamped
    by the gather and duplicate ids are scored without error, either way
    giving a meaningless score. Pass valid distinct deck ids, or use
    Evaluator for checked input.

    Args:
        tables: Tables from jax_tables()
        card_ids: Array of 5-7 distinct card IDs (0-51)

    Returns:
        Hand score (lower = better)
    """
    size = card_ids.shape[-1]
    if size not in FIVE_CARD_SUBSETS:
        raise InvalidHandSize(size)
    packed = CARD_INTS[card_ids]
    subsets = packed[FIVE_CARD_SUBSETS[size]]
    scores = jax.vmap(functools.partial(_score_five, tables))(subsets)
    return jnp.min(scores)


@jax.jit
def batch_evaluate(tables: JaxTables, hands: jnp.ndarray) -> jnp.ndarray:
    """
    Evaluate multiple hands in parallel.

    Like evaluate_hand_jax, each row must hold valid distinct deck ids.

    Args:
        tables: Tables from jax_tables()
        hands: Array of shape (batch_size, num_cards) with card IDs (0-51)

    Returns:
        Array of hand scores
    """
    return jax.vmap(evaluate_hand_jax, in_axes=(None, 0))(tables, hands)


@jax.jit
def hand_vs_hand(tables: JaxTables, hand1: jnp.ndarray, hand2: jnp.ndarray) -> jnp.ndarray:
    """
    Compare two hands.

    Args:
        tables: Tables from jax_tables()
        hand1: First hand (array of card IDs)
        hand2: Second hand (array of card IDs)

    Returns:
        1 if hand1 wins, -1 if hand2 wins, 0 if tie
    """
    score1 = evaluate_hand_jax(tables, hand1)
    score2 = evaluate_hand_jax(tables, hand2)
    return jnp.sign(score2 - score1)
