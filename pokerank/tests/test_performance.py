"""
Performance tests for poker hand evaluation.

Times the Python evaluator and the jitted batch evaluator on random 7-card
hands and checks that both agree.
"""

import time

import jax

from pokerank.evaluator import Evaluator
from pokerank.jax_evaluator import batch_evaluate, jax_tables


def generate_test_hands(num_hands: int, key: jax.Array) -> jax.Array:
    """Generate random 7-card hands as card ID arrays - vectorized version."""
    # Split keys for each hand
    keys = jax.random.split(key, num_hands)

    def generate_single_hand(single_key):
        return jax.random.choice(single_key, 52, shape=(7,), replace=False)

    return jax.vmap(generate_single_hand)(keys)


def benchmark_evaluators(num_hands: int = 1000, chunk_size: int = 100000):
    """Benchmark batch hand evaluation with chunking for memory efficiency."""
    chunk_size = min(num_hands, chunk_size)
    print(f"Benchmarking batch hand evaluation with {num_hands} hands (chunk_size={chunk_size})...")

    tables = jax_tables()

    # Warm up with small batch
    print("Warming up...")
    key = jax.random.PRNGKey(42)
    warmup_hands = generate_test_hands(chunk_size, key)
    batch_evaluate(tables, warmup_hands).block_until_ready()

    num_chunks = (num_hands + chunk_size - 1) // chunk_size
    print(f"Processing {num_chunks} chunks...")

    start_time = time.time()
    total_results = []
    for chunk_idx in range(num_chunks):
        current_chunk_size = min(chunk_size, num_hands - chunk_idx * chunk_size)
        key, subkey = jax.random.split(key)
        hands = generate_test_hands(current_chunk_size, subkey)
        scores = batch_evaluate(tables, hands)
        scores.block_until_ready()
        total_results.append((hands, scores))
    jax_time = time.time() - start_time

    evaluator = Evaluator()
    start_time = time.time()
    for hands, scores in total_results:
        for hand, score in zip(hands.tolist(), scores.tolist()):
            assert evaluator.evaluate(hand).score == score
    python_time = time.time() - start_time

    print(f"JAX batch evaluator: {num_hands / jax_time:,.0f} hands/sec")
    print(f"Python evaluator: {num_hands / python_time:,.0f} hands/sec")
    return jax_time, python_time


def test_performance_smoke():
    """Small benchmark run that also cross-checks both evaluators."""
    jax_time, python_time = benchmark_evaluators(num_hands=2000, chunk_size=500)
    assert jax_time > 0
    assert python_time > 0


if __name__ == "__main__":
    benchmark_evaluators(num_hands=1_000_000)
