"""
ASV benchmarks for RBTreeBase operations.

Covers batch construction via insert, search with configurable hit
ratios, delete drains and range queries of varying width. Trees used by
read-only benchmarks are cached per parameter set; mutating benchmarks
rebuild their tree in setup.
"""

import gc
import zlib

from benchmarks.benchmark_utils import CONFIG, BaseBenchmark, BenchmarkUtils, DEFAULT_BENCHMARK_SEED
from benchmarks.verify import verify_invariants, verify_keys
from rb_trees.factory import create_rbtree


def _seed_for(*params):
    return DEFAULT_BENCHMARK_SEED + zlib.crc32(repr(params).encode()) % 1000


class RBTreeInsertBenchmarks(BaseBenchmark):
    """Benchmarks for tree construction via sequential inserts."""

    params = [CONFIG.sizes, CONFIG.distributions]
    param_names = ['size', 'distribution']

    min_run_count = 5

    def setup(self, size, distribution):
        super().setup(size, distribution)
        self.keys = BenchmarkUtils.generate_deterministic_keys(
            size=size,
            seed=_seed_for(size, distribution),
            distribution=distribution
        )
        gc.collect()
        gc.disable()  # Enabled in teardown

    def time_insert_batch_construction(self, size, distribution):
        """Benchmark full tree construction by inserting all keys."""
        tree = create_rbtree()
        for key in self.keys:
            tree.insert(key, key)

    def track_height(self, size, distribution):
        """Record the resulting height alongside the timings."""
        tree = BenchmarkUtils.build_tree(self.keys)
        _, keys_ok = verify_keys(tree, self.keys)
        if not (keys_ok and verify_invariants(tree)):
            raise AssertionError("Tree invariants violated after construction")
        return tree.depth()[0]

    track_height.unit = "nodes"


class RBTreeSearchBenchmarks(BaseBenchmark):
    """Benchmarks for RBTreeBase.search()."""

    params = [
        CONFIG.sizes,
        [0.0, 0.5, 1.0],
    ]
    param_names = ['size', 'hit_ratio']

    min_run_count = 5

    _tree_cache = {}
    _data_cache = {}

    def setup(self, size, hit_ratio):
        super().setup(size, hit_ratio)
        if size not in self._tree_cache:
            keys = BenchmarkUtils.generate_deterministic_keys(
                size=size, seed=_seed_for(size), distribution='uniform'
            )
            self._tree_cache[size] = BenchmarkUtils.build_tree(keys)
            self._data_cache[size] = keys

        self.tree = self._tree_cache[size]
        self.lookup_keys = BenchmarkUtils.create_lookup_keys(
            insert_keys=self._data_cache[size],
            hit_ratio=hit_ratio,
            seed=_seed_for(size) + 1000
        )
        gc.collect()
        gc.disable()

    def time_search(self, size, hit_ratio):
        search = self.tree.search
        for key in self.lookup_keys:
            search(key)

    def time_contains(self, size, hit_ratio):
        tree = self.tree
        for key in self.lookup_keys:
            key in tree


class RBTreeDeleteBenchmarks(BaseBenchmark):
    """Benchmarks draining a freshly built tree with delete()."""

    params = [
        CONFIG.sizes,
        ['uniform', 'duplicates'],
    ]
    param_names = ['size', 'distribution']

    # Each sample consumes the tree built in setup
    number = 1
    repeat = 10

    def setup(self, size, distribution):
        super().setup(size, distribution)
        self.keys = BenchmarkUtils.generate_deterministic_keys(
            size=size, seed=_seed_for(size, distribution), distribution=distribution
        )
        self.tree = BenchmarkUtils.build_tree(self.keys)
        self.delete_order = list(reversed(self.keys))
        gc.collect()
        gc.disable()

    def time_delete_all(self, size, distribution):
        delete = self.tree.delete
        for key in self.delete_order:
            delete(key)

    def teardown(self, size, distribution):
        super().teardown(size, distribution)
        if not self.tree.is_empty():
            raise AssertionError(f"{self.tree.size()} keys left after draining")


class RBTreeRangeQueryBenchmarks(BaseBenchmark):
    """Benchmarks for range_query() over intervals of growing width."""

    params = [
        [1000, 10000],
        [0.001, 0.01, 0.1],
    ]
    param_names = ['size', 'width_ratio']

    min_run_count = 5

    _tree_cache = {}
    _data_cache = {}

    def setup(self, size, width_ratio):
        super().setup(size, width_ratio)
        if size not in self._tree_cache:
            keys = BenchmarkUtils.generate_deterministic_keys(
                size=size, seed=_seed_for(size), distribution='uniform'
            )
            self._tree_cache[size] = BenchmarkUtils.build_tree(keys)
            self._data_cache[size] = keys

        self.tree = self._tree_cache[size]
        self.bounds = BenchmarkUtils.create_range_bounds(
            self._data_cache[size], width_ratio, seed=_seed_for(size, width_ratio)
        )
        self.sink = []
        gc.collect()
        gc.disable()

    def time_range_query(self, size, width_ratio):
        append = self.sink.append
        for low, high in self.bounds:
            self.tree.range_query(lambda k, v: append(k), low, high)
        self.sink.clear()

    def time_iter_range(self, size, width_ratio):
        for low, high in self.bounds:
            for _ in self.tree.iter_range(low, high):
                pass
