# cpkit

A toolbox of classic algorithms and data structures for contest-style
problems, written in plain Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `cpkit.number_theory` | `sieve`, `divisors`, `divisors_table`, `prime_factors`, `is_prime`, `num_of_factors`, `has_unique_prime_factors`, `prefix_prime_factor_counts`, `lcm`, `extended_gcd`, `mod_inverse`, `fast_pow`, `fermat_inverse`, `SmallestPrimeFactorSieve` |
| `cpkit.combinatorics` | `n_choose_k`, `BinomialTable` (factorials and inverse factorials modulo a prime) |
| `cpkit.bits` | `msb`, `lsb`, `bit_count`, `is_power_of_two`, `BitOperation`, `apply_bit_operation`, `to_binary_digits`, `subsets`, `to_base`, `from_base`, `PrefixAnd` |
| `cpkit.search` | `upper_bound`, `max_window_sum`, `peak_search` |
| `cpkit.segment_tree` | `SegmentTree` with a custom combine function and identity |
| `cpkit.sparse_table` | `SparseTable` with `query` (any associative combine) and `query_idempotent` (O(1) for min, max, gcd) |
| `cpkit.sqrt_decomposition` | `BlockSums` for point updates and range sums |
| `cpkit.mo` | `RangeQuery`, `mo_order`, `solve_offline` |
| `cpkit.kmp` | `prefix_function`, `kmp_search`, `PrefixAutomaton` |
| `cpkit.tries` | `Trie` for words, `BinaryTrie` for 32-bit integers with maximum-XOR queries |
| `cpkit.hashing` | `RollingHash`, `MultisetHash`, `DigitVector`, `random_values` |
| `cpkit.aho_corasick` | `AhoCorasick`, `min_partition`, and the `cpkit-partition` command |
| `cpkit.suffix_array` | `suffix_array`, `adjacent_lcp`, `SuffixArray` |
| `cpkit.graph` | `DisjointSet`, `bfs`, `has_cycle`, `neighbours` |
| `cpkit.shortest_paths` | `Edge`, `dijkstra`, `bellman_ford`, `floyd_warshall`, `count_redundant_edges`, `is_coherent` |
| `cpkit.tree` | `RootedTree` (LCA, k-th ancestor, distances, subtree sizes), `HeavyLightDecomposition` (path maximum with point updates) |
| `cpkit.sqrt_edges` | `ColoredTree`: total weight of edges whose ends differ in colour under recolouring |

Errors are raised as exceptions: out-of-range positions raise `IndexError`,
invalid arguments (a missing modular inverse, a negative power, a malformed
tree) raise `ValueError`.

The hashes in `cpkit.hashing` draw random bases or keys; pass a
`random.Random` instance as `rng` to make them reproducible.

## Examples

Modular arithmetic:

```python
from cpkit.number_theory import fast_pow, mod_inverse, sieve

MOD = 1_000_000_007
fast_pow(2, 10, MOD)   # 1024
mod_inverse(3, 7)      # 5, since 3 * 5 == 15 == 1 (mod 7)
sieve(20)              # [2, 3, 5, 7, 11, 13, 17, 19]
```

Binomial coefficients modulo a prime:

```python
from cpkit.combinatorics import BinomialTable, n_choose_k

table = BinomialTable(1000, 1_000_000_007)
table.ncr(5, 2)        # 10
n_choose_k(6, 3)       # 20
```

Pattern matching:

```python
from cpkit.kmp import kmp_search, prefix_function

kmp_search("abababa", "aba")   # [0, 2, 4]
prefix_function("aabaa")       # [0, 1, 0, 1, 2]
```

Counting words in a trie:

```python
from cpkit.tries import Trie

trie = Trie()
trie.insert("apple")
trie.insert("apply")
trie.count_prefix("app")   # 2
trie.count_word("apple")   # 1
```

Range queries with a segment tree (half-open ranges):

```python
from cpkit.segment_tree import SegmentTree

tree = SegmentTree(8, max, float("-inf"))
tree.build([5, 1, 4, 2, 8, 3])
tree.update(2, 9)
tree.query(0, 4)   # 9
```

Lowest common ancestors:

```python
from cpkit.tree import RootedTree

tree = RootedTree(5, [(1, 2), (1, 3), (3, 4), (3, 5)], 1)
tree.lca(4, 5)     # 3
tree.dist(2, 5)    # 3
```

## Command line

`cpkit-partition` reads a number of test cases from standard input. Each
case gives a count of patterns, the patterns themselves (lower-case
letters), and a text; the command prints, for every case, the least number
of pieces the text can be cut into so that every piece is one of the
patterns, or `impossible`.

```
printf '1\n3\na\nab\nb\nabab\n' | cpkit-partition
```

prints `Case 1: 2`.

## What it does not do

Apart from `cpkit-partition`, the package is a library only: it has no
commands that read problem input, and the prefix automaton is driven
through `PrefixAutomaton.step` and `PrefixAutomaton.feed` rather than an
interactive prompt.