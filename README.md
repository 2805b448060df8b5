# edaulas

Classic data-structure and algorithm exercises, usable as a library and as
an interactive, menu-driven console program. The menus and their messages
are in Portuguese.

## Modules

- `edaulas.bst`: the `Node` dataclass, `insert` (smaller values left, equal
  or greater right), `search`, and the `pre_order`, `in_order` and
  `post_order` generators. `sample_tree()` builds the seven-node tree
  50, 30, 70, 20, 40, 60, 80; `render_tree()` draws the first three levels
  of a tree whose root has two children (and raises `ValueError` otherwise).
- `edaulas.avl`: `height`, `balance_factor`, `rotate_right`, `rotate_left`,
  `rotate_left_right`, `rotate_right_left`, `rebalance` (at the root only),
  `insert_avl`, and `insert_left`, which appends at the end of the leftmost
  path to build a skewed tree for practising rotations.
- `edaulas.simple_sorts`: `bubble_sort`, `selection_sort`, `insertion_sort`,
  `cocktail_shaker_sort`, plus `random_values` (integers 0 to 99) and
  `format_values`. Every sort returns a new list.
- `edaulas.shell`: `knuth_gaps` (the 3x+1 sequence), `shell_sort` and
  `insertion_sort_count`, both returning a `SortRun` with the sorted values
  and the number of shifts made; `shell_sort_steps` yields a snapshot after
  each insertion; `render_bars` draws values as rows of `#`;
  `compare_shell_insertion` sorts one random list both ways and times them.
- `edaulas.advanced_sorts`: `merge_sort`, `quick_sort` (last element as
  pivot, with `partition` available on its own) and `heap_sort` (with
  `heapify`).
- `edaulas.searching`: `sequential_search`, `indexed_search` (blocks of 4 by
  default) and `binary_search`, each sorting a copy first and returning a
  `SearchResult` with the index in that sorted copy (or `None`), the sorted
  values and the time in milliseconds. Also `descending_values` and
  `exchange_sort`.
- `edaulas.words`: `compare_words` (case-insensitive, by letter position via
  `letter_position`), `compare_ordinal` (plain string order), `sort_words`
  (bubble sort under a comparator) and `binary_search_words`.
- `edaulas.graphs`: `random_adjacency`, `bfs` over an adjacency matrix,
  `dijkstra` returning distances and predecessors, and `CaveSystem`, a set of
  caves joined by weighted two-way passages with `add_passage`,
  `create_random_passages`, `edges` and `shortest_path`, which returns a
  `PathResult`.
- `edaulas.grades`: `average`, `row_averages` and the `Student` record with
  `describe()`.

## Install

    pip install .

## Use as a library

    from edaulas.bst import sample_tree, in_order
    from edaulas.advanced_sorts import heap_sort
    from edaulas.graphs import CaveSystem

    print(list(in_order(sample_tree())))   # [20, 30, 40, 50, 60, 70, 80]
    print(heap_sort([5, 3, 9, 1]))         # [1, 3, 5, 9]

    caves = CaveSystem(size=3)
    caves.add_passage(0, 1, 4)
    caves.add_passage(1, 2, 2)
    print(caves.shortest_path(0, 2).path)  # [0, 1, 2]

## Run the menus

    edaulas

With no argument this shows a menu of all lessons. A lesson can be opened
directly by name:

    edaulas arvores

The names are `registros`, `arvores`, `rotacoes`, `ordenacao`, `shellsort`,
`ordenacao-avancada`, `busca` and `grafos`. `--seed N` makes the random data
reproducible. Input is read as whitespace-separated tokens from standard
input; the program stops at end of input.

## What it does not do

Nothing is saved between runs: trees, generated lists and cave systems live
only as long as the menu that made them.

## Tests

    pip install .[test]
    pytest