# algokit

A collection of classic algorithms and data structures in plain Python, with
no dependencies outside the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.numtheory` | `euler_phi_sieve`, `exgcd`, `mod_inverse`, `crt`, `power_mod`, `lucas`, `xor_prefix`, `divisor_blocks`, `LinearBasis` (XOR basis) |
| `algokit.fraction` | `Fraction`, exact rational arithmetic with an explicit `simplify()` |
| `algokit.vector2d` | `Vector2D` (dot, cross, rotation, modulus) and `convex_hull` |
| `algokit.matrix` | `Matrix` with optional modulus, addition, products and `**` powers |
| `algokit.polynomial` | `fft`, `multiply` (integer polynomial product by FFT) |
| `algokit.linear_system` | `solve_linear_system` by Gauss–Jordan elimination |
| `algokit.dsu` | `DSU` (path compression), `SizeDSU` (union by size) |
| `algokit.range_query` | `SegmentTree`, `ZkwTree` (point add, range sum), `SparseTable` |
| `algokit.treap`, `algokit.scapegoat`, `algokit.splay` | ordered multisets `Treap`, `ScapegoatTree`, `SplayTree`, and `SequenceSplay` for range reversal |
| `algokit.shortest_path` | `dijkstra`, `dijkstra_dense`, `bellman_ford`, `johnson` |
| `algokit.mst` | `kruskal`, `prim`, `prim_dense` (MST weight) |
| `algokit.flow` | `Dinic` (min-cost max flow), `ISAP` (max flow) |
| `algokit.connectivity` | `strongly_connected_components`, `cut_vertices`, `bridges`, `block_cut_tree`, `euler_circuit` |
| `algokit.tree_queries` | `BinaryLiftingLCA`, `EulerTourLCA`, `HeavyLightDecomposition` |
| `algokit.strings` | `prefix_function`, `kmp_search`, `z_function`, `manacher`, `suffix_array`, `lcp_array` |
| `algokit.automata` | `SuffixAutomaton`, `GeneralSuffixAutomaton`, `AhoCorasick` |
| `algokit.mo` | `distinct_counts`, Mo's algorithm with updates |
| `algokit.annealing` | `SimulatedAnnealing` (abstract base) and `Objective` |

Graph functions number vertices `0..n-1` and take edges as `(u, v, weight)`
triples (or `(u, v)` pairs for unweighted trees and trails). Unreachable
vertices get a distance of `math.inf`.

## A few examples

```python
from algokit.numtheory import power_mod
from algokit.fraction import Fraction
from algokit.dsu import DSU
from algokit.shortest_path import dijkstra

power_mod(2, 10, 1000)          # 24

half = Fraction(1, 2)
third = Fraction(1, 3)
print(half + third)             # 5/6

dsu = DSU(10)
dsu.merge(1, 2)
dsu.check(1, 2)                 # True

dijkstra(3, [(0, 1, 4), (1, 2, 1), (0, 2, 7)], 0)   # [0, 4, 5]
```

Errors are raised as exceptions. `solve_linear_system` raises
`NoSolutionError` for an inconsistent system and `InfiniteSolutionsError` for
an underdetermined one; `bellman_ford` and `johnson` raise
`NegativeCycleError` when a negative cycle is found; the order-statistic
structures raise `IndexError` for positions out of range.

To use simulated annealing, subclass `SimulatedAnnealing` and define
`energy_of(state)` and `neighbour(state, temperature)`; then call
`run(begin_state, times)` and read the best energy with `energy()`.

## Command-line tools

Three commands read their input from standard input.

Multiply two polynomials. The input is the degrees `n` and `m`, then the
`n + 1` coefficients of the first polynomial and the `m + 1` coefficients of
the second; the coefficients of the product are printed on one line:

```
echo "1 2  1 2  1 2 1" | algokit-polymul
```

Solve a system of `n` linear equations given as `n` and then an
`n × (n + 1)` augmented matrix. Prints `x1=...` lines with two decimals, `-1`
when there is no solution, or `0` when there are infinitely many:

```
echo "2  1 1 3  1 -1 1" | algokit-linsolve
```

Count distinct values in ranges of an array under point updates. The input is
`n m`, the `n` values, then `m` operations with 1-based positions: `Q l r`
asks a query and `R pos value` changes an element. One answer per query is
printed:

```
printf "3 3\n1 2 1\nQ 1 3\nR 2 1\nQ 1 3\n" | algokit-mo
```