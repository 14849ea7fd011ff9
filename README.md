# casegen

A library for building test data for programming-contest problems. It
provides random graphs and trees with optional node and edge weights, random
point sets with plane-geometry helpers, parsing of range formats such as
`"[1, 10)"`, answer checkers, and a small helper for running external
programs.

It has no dependencies outside the standard library. All randomness comes
from Python's `random` module, so `random.seed(...)` makes a run repeatable.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Graphs and trees

Every generator works the same way: create it, change any settings, call
`gen()`, then print it. The printed form has a first line with the counts,
then the node weights when a node weight function was given, then one edge
per line. Nodes are labelled from `begin_node` (1 by default).

```python
import random
from casegen.wheel_graph import WheelGraph
from casegen.grid_graph import GridGraph
from casegen.bipartite_graph import BipartiteGraph
from casegen.flower import Flower
from casegen.max_son_tree import MaxSonTree
from casegen.pseudo_tree import PseudoTree, PseudoInTree, PseudoOutTree

wheel = WheelGraph(6)                 # 6 nodes, 10 edges
wheel.gen()
print(wheel)

grid = GridGraph(12, 15, edges_weight_function=lambda: random.randint(1, 100))
grid.gen()                            # row = -1: the number of rows is chosen
grid.println()

bip = BipartiteGraph(10, 12)          # left = -1: the part sizes are chosen
bip.use_format_left_right()           # first line: left right edge_count
bip.gen()
print(bip)

star = Flower(7, is_rooted=True, root=3)
star.gen()
print(star)

tree = MaxSonTree(20, max_son=3)
tree.gen()
print(tree)

pseudo = PseudoTree(8, cycle=4)
pseudo.gen()
print(pseudo)
```

The generators:

- `casegen.graph.Graph` — a general graph with settings `direction`,
  `multiply_edge`, `self_loop`, `connect` and `swap_node`.
- `casegen.graph.TreeGraph` — a random tree, rooted or not; a rooted tree
  prints its root after the node count and points every edge from father to
  son.
- `casegen.wheel_graph.WheelGraph` — a rim cycle joined to one hub.
- `casegen.grid_graph.GridGraph` — nodes on a grid, edges between
  neighbours; `set_row_column(row, column, ignore)` fixes the shape.
- `casegen.bipartite_graph.BipartiteGraph` — edges only between a left and a
  right part; `set_left_right(left, right)` fixes both sizes, and
  `use_format_node`, `use_format_left_right`, `use_format_node_left` and
  `use_format_node_right` choose the first line (see `NodeOutputFormat`).
- `casegen.flower.Flower` — a star-shaped tree.
- `casegen.max_son_tree.MaxSonTree` — a rooted tree in which no node has
  more than `max_son` sons.
- `casegen.pseudo_tree.PseudoTree`, `PseudoInTree`, `PseudoOutTree` —
  connected graphs with exactly one cycle, undirected or directed.

Settings a generator fixes (for example the edge count of a wheel) raise
`AttributeError` when assigned.

`Graph.output_edges()` returns the generated edges as `casegen.edge.Edge`
objects carrying the output labels; `Edge.edge()` gives `(u, v)` or
`(u, v, w)`.

Output can be replaced per object with `set_output(func)`, where `func`
takes the object and returns its text, and restored with
`set_output_default()`.

## Errors and messages

Settings that cannot be satisfied when generating (too many edges, a bad
cycle size, an invalid range) write a message to standard error and raise
`casegen.messages.GeneratorError`. Setters that reject a value
(`GridGraph.set_row_column`, `BipartiteGraph.set_left_right`) only write a
message and keep the old values. Warnings, such as the range a format was
read as, also go to standard error. `casegen.messages.MessageLog` is the
writer behind these messages and can be pointed at any text stream.

## Points

```python
from casegen.points import RandomPoints

pts = RandomPoints(5, 0, 10, 0, 10)
pts.gen()                             # distinct points unless pts.same_point = True
print(pts)
```

Coordinates are real when any limit is a float, integer otherwise.
`casegen.geometry` supplies `Point` (with `-`, `^` for the cross product and
`*` for the dot product), `quadrant`, `polar_angle_sort` and
`point_direction`, which returns a `PointDirection`.

## Ranges from text

```python
from casegen.number_format import format_to_int_range, format_to_double_range

format_to_int_range("[1, 10)")        # (1, 9)
format_to_double_range("(0.5, 1.5]")  # half-open real range [left, right)
```

`string_to_value`, `is_real_format`, `number_accuracy` and `format_to_range`
are available from the same module.

## Checkers

`casegen.checkers` compares a participant's output with the expected answer
and returns a `CheckResult` holding a `Verdict` and a message:

```python
from casegen.checkers import compare_tokens, compare_doubles, compare_yes_no

compare_tokens("1 2 3", "1 2 3").verdict      # Verdict.OK
compare_doubles("0.1", "0.1000001", 1e-6, 7)  # absolute or relative error
compare_yes_no("YES NO", "yes no")            # case-insensitive
```

## Running programs

```python
from casegen.command import CommandPath

prog = CommandPath("./solution")
prog.add_args("--seed", "42")
exit_code = prog.run()                # runs the command in a shell
```

The module also offers `folder_path`, `file_stem`, `full_path`,
`create_directories`, `copy_file` and `delete_file`.

## What it does not do

casegen is a library only. It has no command-line program, and it does not
manage folders of test cases, run solutions against one another, validate
inputs or compile the checkers: the checkers are Python functions to call on
two strings.