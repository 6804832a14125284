"""
Static lookup table generation and decoding.

The static table is a generated Python module (static_table.py) holding, for
each map, its keys in score order plus (first_score, count) runs that assign
consecutive scores to them. It is produced from the dynamically built table:

    python -m pokerank.tables.codegen [output_path]
"""

import argparse
import itertools
import logging
import os
from typing import Dict, List, Sequence, Tuple

from ..errors import TableConstructionFailure
from .builder import LookupTable, build_lookup_table
from .constants import NUM_MULTIPLES, NUM_RANK_MASKS

logger = logging.getLogger(__name__)

STATIC_TABLE_VERSION = 1
KEYS_PER_LINE = 10

DEFAULT_OUTPUT = os.path.join(os.path.dirname(os.path.abspath(__file__)), "static_table.py")

# (attribute prefix, LookupTable attribute, expected size)
_SECTIONS = (
    ("FLUSH", "flush", NUM_RANK_MASKS),
    ("UNIQUE", "unique", NUM_RANK_MASKS),
    ("MULTIPLES", "multiples", NUM_MULTIPLES),
)

_HEADER = '''"""
Precomputed lookup table for 5-card hand evaluation.

Generated by pokerank.tables.codegen from the dynamically built table; do
not edit by hand. Keys are listed in score order and each (first_score,
count) run assigns consecutive scores to the next count keys.
"""

import jax.numpy as jnp

TABLE_VERSION = {version}
'''


def score_runs(entries: Dict[int, int]) -> Tuple[List[int], List[Tuple[int, int]]]:
    """
    Split a key -> score map into keys ordered by score and runs of
    consecutive scores.

    Returns:
        Tuple of (keys, runs) where runs is a list of (first_score, count)
    """
    ordered = sorted(entries.items(), key=lambda item: item[1])
    keys = [key for key, _ in ordered]
    runs: List[Tuple[int, int]] = []
    for _, score in ordered:
        if runs and runs[-1][0] + runs[-1][1] == score:
            runs[-1] = (runs[-1][0], runs[-1][1] + 1)
        else:
            runs.append((score, 1))
    return keys, runs


def _render_keys(name: str, keys: Sequence[int]) -> str:
    lines = [f"{name} = jnp.array(["]
    for i in range(0, len(keys), KEYS_PER_LINE):
        lines.append("    " + ", ".join(str(key) for key in keys[i:i + KEYS_PER_LINE]) + ",")
    lines.append("], dtype=jnp.int32)")
    return "\n".join(lines)


def render_static_table(table: LookupTable, version: int = STATIC_TABLE_VERSION) -> str:
    """Render a lookup table as the source of a static table module."""
    parts = [_HEADER.format(version=version)]
    for prefix, attr, _ in _SECTIONS:
        keys, runs = score_runs(dict(getattr(table, attr)))
        parts.append(f"{prefix}_RUNS = {tuple(runs)!r}")
        parts.append(_render_keys(f"{prefix}_KEYS", keys) + "\n")
    return "\n".join(parts)


def _fail(message: str):
    logger.critical(message)
    raise TableConstructionFailure(message)


def decode_static_table(module) -> LookupTable:
    """
    Decode a static table module (or any object with the same attributes).

    Raises:
        TableConstructionFailure: on a version mismatch, a wrong entry count
            or a repeated key
    """
    version = getattr(module, "TABLE_VERSION", None)
    if version != STATIC_TABLE_VERSION:
        _fail(f"Static table version {version!r} does not match expected {STATIC_TABLE_VERSION}")

    maps = []
    for prefix, attr, expected in _SECTIONS:
        runs = getattr(module, f"{prefix}_RUNS")
        keys = [int(key) for key in getattr(module, f"{prefix}_KEYS").tolist()]
        if len(keys) != expected or sum(count for _, count in runs) != expected:
            _fail(f"Static {attr} table has {len(keys)} keys in runs of "
                  f"{sum(count for _, count in runs)}, expected {expected}")
        entries: Dict[int, int] = {}
        remaining = iter(keys)
        for first_score, count in runs:
            for score, key in zip(range(first_score, first_score + count),
                                  itertools.islice(remaining, count)):
                if key in entries:
                    _fail(f"Duplicate key {key} in static {attr} table")
                entries[key] = score
        maps.append(entries)
    return LookupTable(*maps)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Regenerate the static lookup table module")
    parser.add_argument("output", nargs="?", default=DEFAULT_OUTPUT,
                        help="Path of the module to write (default: the packaged static_table.py)")
    args = parser.parse_args(argv)

    source = render_static_table(build_lookup_table())
    with open(args.output, "w", encoding="utf-8") as f:
        f.write(source)
    print(f"Wrote static lookup table to {args.output}")


if __name__ == "__main__":
    main()
