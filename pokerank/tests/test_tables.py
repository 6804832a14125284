"""
Unit tests for lookup table construction, the static table and table sources.
"""

import logging
import types
from concurrent.futures import ThreadPoolExecutor

import jax.numpy as jnp
import pytest

import pokerank.tables as tables
from pokerank.errors import TableConstructionFailure
from pokerank.tables import (
    HandKey, KeyKind, LookupTable, build_lookup_table, clear_lookup_tables,
    decode_static_table, get_lookup_table, load_static_table, render_static_table,
    verify_static_table
)
from pokerank.tables import static_table
from pokerank.tables.builder import _ScoreWriter, prime_product_from_rank_bits, rank_masks
from pokerank.tables.codegen import score_runs
from pokerank.tables.constants import STRAIGHTS


@pytest.fixture(scope="module")
def table():
    return build_lookup_table()


@pytest.fixture
def fresh_tables():
    clear_lookup_tables()
    yield
    clear_lookup_tables()


def module_from_source(source: str) -> types.SimpleNamespace:
    namespace = {}
    exec(compile(source, "<static_table>", "exec"), namespace)
    return types.SimpleNamespace(**{k: v for k, v in namespace.items() if k.isupper()})


class TestBuilder:
    """Test the dynamically built table."""

    def test_sizes(self, table):
        """Test the number of entries in each map."""
        assert len(table.flush) == 1287
        assert len(table.unique) == 1287
        assert len(table.multiples) == 4888
        assert len(table) == 7462

    def test_every_score_once(self, table):
        """Test that each score from 1 to 7462 is assigned exactly once."""
        scores = list(table.flush.values()) + list(table.unique.values()) + list(table.multiples.values())
        assert sorted(scores) == list(range(1, 7463))

    def test_straights(self, table):
        """Test straight and straight flush scores."""
        for i, straight in enumerate(STRAIGHTS):
            assert table.flush[straight] == 1 + i
            assert table.unique[straight] == 1600 + i

    def test_flush_and_high_card_share_order(self, table):
        """Test that flushes and high cards rank the same masks the same way."""
        for rank_mask, score in table.flush.items():
            if score > 10:
                assert table.unique[rank_mask] - score == 6186 - 323

    def test_known_scores(self, table):
        """Test a few fixed entries."""
        # AAAA K, 2222 3, AAA KK, 222 33
        assert table.multiples[41 ** 4 * 37] == 11
        assert table.multiples[2 ** 4 * 3] == 166
        assert table.multiples[41 ** 3 * 37 ** 2] == 167
        assert table.multiples[2 ** 3 * 3 ** 2] == 322
        # A K Q J 9 is the best flush, 7 5 4 3 2 the worst high card
        assert table.flush[0b1111010000000] == 323
        assert table.unique[0b0000000101111] == 7462

    def test_key_collision(self, table):
        """Test that a prime product equal to a rank mask resolves by kind."""
        # 3333 4 has prime product 3**4 * 5 = 405, the rank mask of T 9 6 4 2
        assert prime_product_from_rank_bits(0b0000110010101) == 23 * 19 * 11 * 5 * 2
        assert table.score(HandKey(KeyKind.MULTIPLES, 405)) == 153
        assert table.score(HandKey(KeyKind.UNIQUE, 405)) == 7370
        assert len(set(table.unique) & set(table.multiples)) == 73

    def test_rank_masks(self):
        """Test enumeration of 5-bit rank masks."""
        masks = list(rank_masks())
        assert len(masks) == 1287
        assert masks == sorted(masks)
        assert all(bin(mask).count("1") == 5 for mask in masks)

    def test_read_only(self, table):
        """Test that the maps cannot be modified."""
        with pytest.raises(TypeError):
            table.flush[0] = 1
        assert table.map_for(KeyKind.MULTIPLES) is table.multiples

    def test_deterministic(self, table):
        """Test that two builds are equal."""
        assert build_lookup_table() == table

    def test_build_is_logged(self, caplog):
        """Test that construction is logged."""
        with caplog.at_level(logging.INFO, logger="pokerank.tables.builder"):
            build_lookup_table()
        assert "Built lookup table" in caplog.text


class TestScoreWriter:
    """Test consistency checks during construction."""

    def test_duplicate_key(self, caplog):
        """Test that a repeated key aborts construction."""
        writer = _ScoreWriter("test")
        with pytest.raises(TableConstructionFailure):
            writer.write([7, 7], 1, 2, "pair")
        assert "Duplicate" in caplog.text

    def test_wrong_boundary(self):
        """Test that a category must end on its boundary."""
        writer = _ScoreWriter("test")
        with pytest.raises(TableConstructionFailure):
            writer.write([1, 2, 3], 1, 4, "straight")

    def test_consecutive_scores(self):
        """Test that keys get consecutive scores."""
        writer = _ScoreWriter("test")
        writer.write([5, 9, 2], 10, 12, "flush")
        assert writer.entries == {5: 10, 9: 11, 2: 12}


class TestStaticTable:
    """Test the packaged static table."""

    def test_matches_dynamic(self, table):
        """Test that the static table equals the built table."""
        assert load_static_table() == table

    def test_packaged_module_is_current(self, table):
        """Test that regenerating the module reproduces the packaged file."""
        with open(static_table.__file__, encoding="utf-8") as f:
            assert render_static_table(table) == f.read()

    def test_render_and_decode(self, table):
        """Test decoding rendered source."""
        module = module_from_source(render_static_table(table))
        assert module.TABLE_VERSION == 1
        assert decode_static_table(module) == table

    def test_version_mismatch(self, table):
        """Test that an unknown version is rejected."""
        module = module_from_source(render_static_table(table, version=2))
        with pytest.raises(TableConstructionFailure):
            decode_static_table(module)

    def test_missing_entries(self, table):
        """Test that a truncated map is rejected."""
        module = module_from_source(render_static_table(table))
        module.FLUSH_KEYS = module.FLUSH_KEYS[:-1]
        with pytest.raises(TableConstructionFailure):
            decode_static_table(module)

    def test_duplicate_entries(self, table):
        """Test that a repeated key is rejected."""
        module = module_from_source(render_static_table(table))
        module.UNIQUE_KEYS = module.UNIQUE_KEYS.at[1].set(module.UNIQUE_KEYS[0])
        with pytest.raises(TableConstructionFailure):
            decode_static_table(module)

    def test_verify(self, table):
        """Test verification against a fresh build."""
        verify_static_table(load_static_table())
        tampered = LookupTable(table.flush, table.unique, {**table.multiples, 405: 154})
        with pytest.raises(TableConstructionFailure):
            verify_static_table(tampered)

    def test_arrays(self):
        """Test the artifact array types."""
        assert static_table.FLUSH_KEYS.dtype == jnp.int32
        assert static_table.MULTIPLES_KEYS.shape == (4888,)

    def test_runs_are_merged(self, table):
        """Test that consecutive score ranges share one run."""
        _, runs = score_runs({7: 11, 8: 12, 9: 14, 10: 13})
        assert runs == [(11, 4)]
        _, runs = score_runs({7: 11, 8: 12, 9: 20})
        assert runs == [(11, 2), (20, 1)]
        # Quads run straight into full houses, trips into two pair and pairs
        assert static_table.MULTIPLES_RUNS == ((11, 312), (1610, 4576))
        assert static_table.FLUSH_RUNS == tuple(score_runs(table.flush)[1])
        assert static_table.UNIQUE_RUNS == tuple(score_runs(table.unique)[1])


class TestTableSources:
    """Test the shared, lazily created tables."""

    def test_shared(self, fresh_tables):
        """Test that each source is created once and shared."""
        assert get_lookup_table() is get_lookup_table("dynamic")
        assert get_lookup_table("static") is get_lookup_table("static")
        assert get_lookup_table("static") == get_lookup_table("dynamic")

    def test_unknown_source(self):
        """Test that unknown sources are rejected."""
        with pytest.raises(ValueError):
            get_lookup_table("network")

    def test_concurrent_first_use(self, fresh_tables, monkeypatch):
        """Test that racing first callers build the table exactly once."""
        calls = []

        def counting_build():
            calls.append(1)
            return build_lookup_table()

        monkeypatch.setattr(tables, "build_lookup_table", counting_build)
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: get_lookup_table("dynamic"), range(32)))

        assert len(calls) == 1
        assert all(result is results[0] for result in results)

    def test_verified_static_source(self, fresh_tables):
        """Test loading the static source with verification."""
        assert get_lookup_table("static", verify=True) == build_lookup_table()

    def test_verify_after_unverified_load(self, fresh_tables, monkeypatch):
        """Test that verification runs once even when the table is already cached."""
        calls = []

        def counting_verify(table=None):
            calls.append(table)
            verify_static_table(table)

        monkeypatch.setattr(tables, "verify_static_table", counting_verify)
        loaded = get_lookup_table("static")
        assert calls == []
        assert get_lookup_table("static", verify=True) is loaded
        assert get_lookup_table("static", verify=True) is loaded
        assert len(calls) == 1
        assert calls[0] is loaded

    def test_verify_rejects_cached_table(self, fresh_tables, table, monkeypatch):
        """Test that a bad cached static table fails a later verified request."""
        tampered = LookupTable(table.flush, table.unique, {**table.multiples, 405: 154})
        monkeypatch.setattr(tables, "load_static_table", lambda: tampered)
        assert get_lookup_table("static") is tampered
        with pytest.raises(TableConstructionFailure):
            get_lookup_table("static", verify=True)
        with pytest.raises(TableConstructionFailure):
            get_lookup_table("static", verify=True)
