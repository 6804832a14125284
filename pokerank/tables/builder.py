"""
Lookup table construction for 5-card hand evaluation.

Every distinguishable 5-card hand is assigned a score from 1 (royal flush)
to 7462 (7-5-4-3-2 offsuit), enumerated category by category in strength
order. Scores are stored in three read-only maps:

- flush:     rank mask -> score, for hands whose five cards share a suit
- unique:    rank mask -> score, for non-flush hands with five distinct ranks
- multiples: prime product -> score, for hands with a repeated rank

The unique and multiples maps are kept apart because their raw keys
overlap: four threes with a four kicker has prime product 3**4 * 5 = 405,
which is also the rank mask of T-9-6-4-2.
"""

import itertools
import logging
import time
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, NamedTuple

from ..errors import TableConstructionFailure
from .constants import (
    NUM_MULTIPLES, NUM_RANK_MASKS, NUM_RANKS, PRIMES, RANKS_DESCENDING, STRAIGHTS,
    WORST_FLUSH, WORST_FOUR_OF_A_KIND, WORST_FULL_HOUSE, WORST_HIGH_CARD,
    WORST_PAIR, WORST_STRAIGHT, WORST_STRAIGHT_FLUSH, WORST_THREE_OF_A_KIND,
    WORST_TWO_PAIR
)

logger = logging.getLogger(__name__)


class KeyKind(Enum):
    """Which map a 5-card hand is looked up in."""

    FLUSH = "flush"
    UNIQUE = "unique"
    MULTIPLES = "multiples"


class HandKey(NamedTuple):
    kind: KeyKind
    value: int


class LookupTable:
    """
    Read-only score tables for 5-card hands.

    Instances are immutable once constructed; the maps are exposed as
    MappingProxyType views.
    """

    __slots__ = ("flush", "unique", "multiples", "_maps")

    def __init__(self, flush: Mapping[int, int], unique: Mapping[int, int],
                 multiples: Mapping[int, int]):
        self.flush = MappingProxyType(dict(flush))
        self.unique = MappingProxyType(dict(unique))
        self.multiples = MappingProxyType(dict(multiples))
        self._maps = MappingProxyType({
            KeyKind.FLUSH: self.flush,
            KeyKind.UNIQUE: self.unique,
            KeyKind.MULTIPLES: self.multiples,
        })

    def map_for(self, kind: KeyKind) -> Mapping[int, int]:
        return self._maps[kind]

    def score(self, key: HandKey) -> int:
        """Score of the hand identified by key."""
        return self._maps[key.kind][key.value]

    def __len__(self) -> int:
        return len(self.flush) + len(self.unique) + len(self.multiples)

    def __eq__(self, other) -> bool:
        if not isinstance(other, LookupTable):
            return NotImplemented
        return (self.flush == other.flush
                and self.unique == other.unique
                and self.multiples == other.multiples)

    def __hash__(self):
        return id(self)

    def __repr__(self) -> str:
        return (f"LookupTable(flush={len(self.flush)}, unique={len(self.unique)}, "
                f"multiples={len(self.multiples)})")


def prime_product_from_rank_bits(rank_bits: int) -> int:
    """Product of the primes of every rank present in a rank mask."""
    product = 1
    for i in range(NUM_RANKS):
        if rank_bits & (1 << i):
            product *= PRIMES[i]
    return product


def rank_masks() -> Iterable[int]:
    """All C(13, 5) rank masks with exactly five bits set, ascending."""
    return sorted(sum(1 << i for i in combo) for combo in itertools.combinations(range(NUM_RANKS), 5))


class _ScoreWriter:
    """Assigns consecutive scores to keys of one map and rejects duplicates."""

    def __init__(self, name: str):
        self.name = name
        self.entries: Dict[int, int] = {}

    def write(self, keys: Iterable[int], first_score: int, last_score: int, category: str) -> None:
        score = first_score
        for key in keys:
            if key in self.entries:
                message = (f"Duplicate {self.name} key {key} while scoring {category}: "
                           f"already mapped to {self.entries[key]}")
                logger.critical(message)
                raise TableConstructionFailure(message)
            self.entries[key] = score
            score += 1
        if score - 1 != last_score:
            message = (f"{category} ended at score {score - 1}, expected {last_score}")
            logger.critical(message)
            raise TableConstructionFailure(message)
        logger.debug("Scored %s: %d-%d in %s table", category, first_score, last_score, self.name)


def _check_size(writer: _ScoreWriter, expected: int) -> None:
    if len(writer.entries) != expected:
        message = f"{writer.name} table has {len(writer.entries)} entries, expected {expected}"
        logger.critical(message)
        raise TableConstructionFailure(message)


def build_lookup_table() -> LookupTable:
    """
    Enumerate all 7462 hand classes and build the lookup table.

    Returns:
        A complete, immutable LookupTable

    Raises:
        TableConstructionFailure: if a key repeats or a category does not
            end on its fixed boundary
    """
    start = time.perf_counter()
    flush = _ScoreWriter("flush")
    unique = _ScoreWriter("unique")
    multiples = _ScoreWriter("multiples")

    straights = set(STRAIGHTS)
    not_straights = sorted((bits for bits in rank_masks() if bits not in straights), reverse=True)

    # Distinct ranks: suited and unsuited contexts share the same key order
    flush.write(STRAIGHTS, 1, WORST_STRAIGHT_FLUSH, "straight flush")
    flush.write(not_straights, WORST_FULL_HOUSE + 1, WORST_FLUSH, "flush")
    unique.write(STRAIGHTS, WORST_FLUSH + 1, WORST_STRAIGHT, "straight")
    unique.write(not_straights, WORST_PAIR + 1, WORST_HIGH_CARD, "high card")

    multiples.write(
        (PRIMES[quads] ** 4 * PRIMES[kicker]
         for quads in RANKS_DESCENDING
         for kicker in RANKS_DESCENDING if kicker != quads),
        WORST_STRAIGHT_FLUSH + 1, WORST_FOUR_OF_A_KIND, "four of a kind")

    multiples.write(
        (PRIMES[trips] ** 3 * PRIMES[pair] ** 2
         for trips in RANKS_DESCENDING
         for pair in RANKS_DESCENDING if pair != trips),
        WORST_FOUR_OF_A_KIND + 1, WORST_FULL_HOUSE, "full house")

    multiples.write(
        (PRIMES[trips] ** 3 * PRIMES[k1] * PRIMES[k2]
         for trips in RANKS_DESCENDING
         for k1, k2 in itertools.combinations([k for k in RANKS_DESCENDING if k != trips], 2)),
        WORST_STRAIGHT + 1, WORST_THREE_OF_A_KIND, "three of a kind")

    multiples.write(
        (PRIMES[high] ** 2 * PRIMES[low] ** 2 * PRIMES[kicker]
         for high, low in itertools.combinations(RANKS_DESCENDING, 2)
         for kicker in RANKS_DESCENDING if kicker not in (high, low)),
        WORST_THREE_OF_A_KIND + 1, WORST_TWO_PAIR, "two pair")

    multiples.write(
        (PRIMES[pair] ** 2 * PRIMES[k1] * PRIMES[k2] * PRIMES[k3]
         for pair in RANKS_DESCENDING
         for k1, k2, k3 in itertools.combinations([k for k in RANKS_DESCENDING if k != pair], 3)),
        WORST_TWO_PAIR + 1, WORST_PAIR, "pair")

    _check_size(flush, NUM_RANK_MASKS)
    _check_size(unique, NUM_RANK_MASKS)
    _check_size(multiples, NUM_MULTIPLES)

    table = LookupTable(flush.entries, unique.entries, multiples.entries)
    logger.info("Built lookup table with %d flush, %d unique and %d multiples entries in %.1f ms",
                len(table.flush), len(table.unique), len(table.multiples),
                (time.perf_counter() - start) * 1000)
    return table
