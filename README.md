# algoset

A small library of well-known algorithms written as plain, dependency-free
Python functions. It covers arrays, intervals, strings, subarray counting,
number theory, a disjoint-set structure, graphs, grids and binary trees.

Requires Python 3.10 or later.

## Installation

```
pip install .
```

To install the test tools and run the suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algoset.arrays` | `two_sum`, `min_jumps`, `can_jump`, `distribute_candy`, `content_children`, `lemonade_change`, `longest_fib_subsequence`, `tuple_same_product`, `max_absolute_sum`, `pivot_array`, `count_bad_pairs`, `apply_operations`, `merge_id_values`, `colored_cells`, `divide_array` |
| `algoset.intervals` | `merge_intervals`, `insert_interval`, `erase_overlap_intervals` |
| `algoset.strings` | `min_window`, `check_valid_string`, `happy_string`, `find_different_binary_string`, `smallest_number`, `clear_digits` |
| `algoset.subarrays` | `count_subarrays_with_sum`, `count_subarrays_with_k_distinct`, `count_odd_sum_subarrays`, `MOD` |
| `algoset.number_theory` | `count_primes`, `is_power_of_three`, `is_sum_of_powers_of_three` |
| `algoset.dsu` | `DisjointSet` with `find` and `union` |
| `algoset.graphs` | `can_finish`, `find_order`, `count_provinces`, `is_bipartite`, `equations_possible`, `make_connected`, `count_unreachable_pairs`, `most_profitable_path` |
| `algoset.grids` | `shortest_path_binary_matrix`, `minimum_effort_path` |
| `algoset.trees` | `TreeNode`, `recover_from_preorder`, `ContaminatedTree` |

## Examples

```python
from algoset.intervals import merge_intervals
from algoset.strings import min_window
from algoset.graphs import find_order
from algoset.dsu import DisjointSet
from algoset.trees import recover_from_preorder, ContaminatedTree

merge_intervals([[1, 3], [2, 6], [8, 10]])    # [[1, 6], [8, 10]]
min_window("ADOBECODEBANC", "ABC")             # "BANC"
find_order(2, [[1, 0]])                        # [0, 1]

dsu = DisjointSet(4)
dsu.union(0, 1)                                # True: two sets were joined
dsu.find(1) == dsu.find(0)                     # True

root = recover_from_preorder("1-2--3--4-5--6--7")
root.val                                       # 1

tree = ContaminatedTree(root)
tree.find(0)                                   # True
0 in tree                                      # True
```

## Behaviour worth knowing

- Functions take ordinary lists and strings and return new values; inputs are
  not modified.
- Where no answer exists, several functions return an empty value rather than
  raising: `two_sum`, `find_order` and `divide_array` return `[]`;
  `min_window` and `happy_string` return `""`; `shortest_path_binary_matrix`
  and `make_connected` return `-1`; `longest_fib_subsequence` returns `0`.
- `count_primes(n)` counts the primes at most `n`, except that `count_primes(2)`
  returns `0`.
- `count_odd_sum_subarrays` returns its count modulo `MOD` (`10**9 + 7`).
- `DisjointSet.union` returns `False` when both elements were already in the
  same set; `find` and `union` raise `IndexError` for elements outside
  `0 .. size - 1`.
- `ValueError` is raised for input that cannot be worked on, for example:
  an empty list given to `min_jumps` or `max_absolute_sum`, an unreachable end
  in `min_jumps`, a length that is not a multiple of 3 in `divide_array`,
  `k < 1` or `n < 0` in `happy_string`, a pattern longer than 8 characters in
  `smallest_number`, a malformed equation in `equations_possible`, a node
  number out of range in the graph functions, a tree with no leaf in
  `most_profitable_path`, an empty grid in `minimum_effort_path`, and a
  malformed traversal string in `recover_from_preorder`.

## What this package does not do

It is a library only: there is no command-line program, and nothing reads
input files or stores results.