"""
Lookup table sources.

The table can be built at runtime ("dynamic") or decoded from the packaged
static_table module ("static"). Either way it is created once per process
and shared; concurrent first use builds it exactly once.
"""

import importlib
import logging
import threading
from typing import Dict, Optional, Set

from ..errors import TableConstructionFailure
from .builder import HandKey, KeyKind, LookupTable, build_lookup_table
from .codegen import decode_static_table, render_static_table

logger = logging.getLogger(__name__)

TABLE_SOURCES = ("dynamic", "static")

_tables: Dict[str, LookupTable] = {}
_verified: Set[str] = set()
_lock = threading.Lock()


def load_static_table() -> LookupTable:
    """Decode the packaged static table."""
    module = importlib.import_module(f"{__name__}.static_table")
    table = decode_static_table(module)
    logger.info("Loaded static lookup table (%d entries)", len(table))
    return table


def verify_static_table(table: Optional[LookupTable] = None) -> None:
    """
    Check the static table against a freshly built one.

    Raises:
        TableConstructionFailure: if they differ
    """
    if table is None:
        table = load_static_table()
    if table != build_lookup_table():
        message = "Static lookup table does not match the built table; regenerate it with pokerank.tables.codegen"
        logger.critical(message)
        raise TableConstructionFailure(message)


def get_lookup_table(source: str = "dynamic", verify: bool = False) -> LookupTable:
    """
    Get the shared lookup table for a source, creating it on first use.

    Args:
        source: "dynamic" to build at runtime or "static" to decode the
            packaged table
        verify: For the static source, compare the table against a fresh
            build the first time verification is requested, whether or not
            the table was already loaded

    Returns:
        The process-wide LookupTable for that source
    """
    needs_verify = verify and source == "static"
    table = _tables.get(source)
    if table is not None and (not needs_verify or source in _verified):
        return table
    if source not in TABLE_SOURCES:
        raise ValueError(f"Unknown table source {source!r}, expected one of {TABLE_SOURCES}")

    with _lock:
        table = _tables.get(source)
        if table is None:
            table = load_static_table() if source == "static" else build_lookup_table()
        if needs_verify and source not in _verified:
            verify_static_table(table)
            _verified.add(source)
        _tables[source] = table
    return table


def clear_lookup_tables() -> None:
    """Drop the cached tables so the next use recreates them."""
    with _lock:
        _tables.clear()
        _verified.clear()


__all__ = [
    "HandKey",
    "KeyKind",
    "LookupTable",
    "TABLE_SOURCES",
    "build_lookup_table",
    "clear_lookup_tables",
    "decode_static_table",
    "get_lookup_table",
    "load_static_table",
    "render_static_table",
    "verify_static_table",
]
