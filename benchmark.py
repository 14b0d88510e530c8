#!/usr/bin/env python3
"""
Performance Script for the Red-Black Tree

Workloads:
1. Sequential inserts (ascending values)
2. Reverse inserts (descending values)
3. Random inserts (shuffled distinct values)
4. Duplicate-heavy inserts (values drawn from a small range)

Metrics:
- Operations per second (ops/sec)
- Latency (p50, p95, p99)
- Final height against the 2 * log2(N + 1) bound
"""

import math
import random
import statistics
import sys
import time

from llrb.models.sortedcontainers import RedBlackTree
from llrb.tooling.inspection import height, in_order, validate


class PerformanceTest:
    def __init__(self, count: int, seed: int = 42):
        if count <= 0:
            raise ValueError(f"count must be positive, got {count}")
        self.count = count
        self.rng = random.Random(seed)

    @staticmethod
    def calculate_stats(latencies: list[int]) -> dict:
        """Calculate latency statistics (latencies in nanoseconds)."""
        if len(latencies) < 2:
            return {}

        percentiles = statistics.quantiles(latencies, n=100)
        return {
            "min_us": min(latencies) / 1_000,
            "max_us": max(latencies) / 1_000,
            "mean_us": statistics.mean(latencies) / 1_000,
            "p50_us": percentiles[49] / 1_000,
            "p95_us": percentiles[94] / 1_000,
            "p99_us": percentiles[98] / 1_000,
        }

    def run_workload(self, name: str, values: list[int]) -> dict:
        print(f"\n{'='*60}")
        print(f"{name} Test: {len(values)} operations")
        print(f"{'='*60}")

        tree = RedBlackTree()
        latencies = []
        inserted = 0

        start_time = time.perf_counter_ns()
        for value in values:
            op_start = time.perf_counter_ns()
            if tree.add(value):
                inserted += 1
            latencies.append(time.perf_counter_ns() - op_start)
        elapsed = (time.perf_counter_ns() - start_time) / 1_000_000_000

        validate(tree)
        distinct = len(in_order(tree))
        tree_height = height(tree)

        results = {
            "test": name,
            "count": len(values),
            "inserted": inserted,
            "distinct": distinct,
            "elapsed_sec": elapsed,
            "ops_per_sec": len(values) / elapsed if elapsed else float("inf"),
            "height": tree_height,
            "height_bound": 2 * math.log2(distinct + 1),
            **self.calculate_stats(latencies),
        }

        self.print_results(results)
        return results

    def bench_sequential(self) -> dict:
        return self.run_workload("Sequential Insert", list(range(self.count)))

    def bench_reverse(self) -> dict:
        return self.run_workload("Reverse Insert", list(range(self.count, 0, -1)))

    def bench_random(self) -> dict:
        values = list(range(self.count))
        self.rng.shuffle(values)
        return self.run_workload("Random Insert", values)

    def bench_duplicates(self) -> dict:
        key_range = max(1, self.count // 10)
        values = [self.rng.randrange(key_range) for _ in range(self.count)]
        return self.run_workload("Duplicate-heavy Insert", values)

    @staticmethod
    def print_results(results: dict):
        print(f"\nResults for {results['test']}:")
        print(f"  Operations:     {results['count']}")
        print(f"  Inserted:       {results['inserted']}")
        print(f"  Elapsed:        {results['elapsed_sec']:.3f}s")
        print(f"  Throughput:     {results['ops_per_sec']:,.0f} ops/sec")
        if "p50_us" in results:
            print(
                f"  Latency:        p50={results['p50_us']:.2f}us "
                f"p95={results['p95_us']:.2f}us p99={results['p99_us']:.2f}us"
            )
        status = "OK" if results["height"] <= results["height_bound"] else "EXCEEDED"
        print(
            f"  Height:         {results['height']} "
            f"(bound {results['height_bound']:.2f}, {status})"
        )


def run_tests(count: int) -> list[dict]:
    test = PerformanceTest(count)
    return [
        test.bench_sequential(),
        test.bench_reverse(),
        test.bench_random(),
        test.bench_duplicates(),
    ]


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "quick":
        run_tests(10_000)
    else:
        run_tests(200_000)
