# dsworkbench

Classic data structures and sorting algorithms, written plainly enough to
read and study, plus two small console programs: an address book and a game
of noughts and crosses. Pure Python, no dependencies.

## Contents

- `dsworkbench.stack`: `Stack`, a last-in first-out stack with `push`,
  `pop`, `peek` and `is_empty`. `pop` and `peek` raise `IndexError` when the
  stack is empty.
- `dsworkbench.brackets`: `is_valid(text)` returns `True` when every `(`,
  `[` and `{` is closed in the right order. Any other character is treated
  as a closer, so it makes the text invalid.
- `dsworkbench.linkedqueue`: `LinkedQueue`, a first-in first-out queue
  built from linked nodes, with `push`, `pop`, `front`, `back` and
  `is_empty`.
- `dsworkbench.seqlist`: `SeqList`, a list addressed by position, with
  `push_back`, `push_front`, `pop_front`, `pop_back`, `insert`, `erase`,
  `find` (returns the position or `None`) and `modify`. A position out of
  range raises `IndexError`.
- `dsworkbench.heap`:
  - `Heap`, a min-heap with `push`, `pop`, `top` and `is_empty`;
  - `sift_up(items, child)` for a min-heap;
  - `sift_down(items, size, parent)` for a max-heap;
  - `heap_sort(items)`, an ascending in-place sort;
  - `top_k(items, k)`, which returns the `k` largest values arranged as a
    min-heap and raises `ValueError` when `k` is out of range.
- `dsworkbench.binarytree`: `Node(value, left, right)` and functions over
  trees.
  - `preorder`, `inorder` and `postorder` return lists in which `None`
    marks each empty subtree.
  - `level_order` returns the values level by level.
  - `tree_size`, `leaf_count`, `level_count(root, k)` (the root is level 1),
    `find`, `depth` and `is_complete` measure and search the tree.
- `dsworkbench.sorting`: in-place sorts that return `None`.
  - `insert_sort`, `shell_sort`, `select_sort`, `heap_sort`, `bubble_sort`
    and `count_sort` (for integers).
  - `quick_sort` and `quick_sort_iterative`, each taking an optional
    `begin` and `end` (inclusive).
  - Three partition schemes, `partition_hoare`, `partition_hole` and
    `partition_pointers`, plus `median_of_three`.
  - `merge_sort` and `merge_sort_iterative`.
  - `merge_files(first, second, merged)`, which merges two files of sorted
    integers, one per line.
  - `merge_sort_file(path, workdir)`, an external sort. It cuts the input
    into chunks of `CHUNK_SIZE` (10) values and writes the chunks to files
    named `1`, `2`, … in `workdir`. It then merges them in turn into `12`,
    `123`, … and returns the path of the final, fully sorted file.
- `dsworkbench.contact`: an address book.
  - `Person(name, sex, age, tele, addr)` is one entry. Text fields must fit
    in 19, 4, 11 and 29 UTF-8 bytes respectively, or `ValueError` is raised.
  - `Contact` holds the entries, with `add`, `delete`, `clear`, `find`,
    `modify`, `sort_by_name`, `sort_by_age`, `format_table`, `save` and
    `load`.
  - Entries are stored as fixed-size binary records (`RECORD`).
- `dsworkbench.tictactoe`: `Board`, a 3×3 board with squares numbered 1 to
  3, and `Outcome`.
  - `Board` has `render`, `place(row, col, mark)`, `computer_move(rng)`,
    `is_full` and `outcome`.
  - `outcome` returns `PLAYER_WINS`, `COMPUTER_WINS`, `DRAW` or `CONTINUE`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from dsworkbench.brackets import is_valid
from dsworkbench.sorting import quick_sort
from dsworkbench.heap import top_k
from dsworkbench.binarytree import Node, level_order, depth

is_valid("{}{}{}")          # True
is_valid("([)]")            # False

data = [27, 15, 19, 18, 28, 34, 65, 49, 25, 37]
quick_sort(data)            # sorts in place

sorted(top_k([5, 1, 9, 3, 7], 2))   # [7, 9]

root = Node(1, Node(2, Node(3)), Node(4, Node(5), Node(6)))
level_order(root)           # [1, 2, 4, 3, 5, 6]
depth(root)                 # 3
```

## Console programs

The address book loads its entries from a data file at start and saves them
back when you choose 0 to exit. The data file is `contact.dat` in the current
directory unless you give another path:

```
dsworkbench-contact [path]
```

Play noughts and crosses against the computer. `--seed` makes the
computer's moves repeatable:

```
dsworkbench-tictactoe [--seed N]
```

Both programs print their menus and prompts in Chinese.

## What it does not do

- The computer in noughts and crosses plays random empty squares. It has no
  strategy.
- The address book's data file is a plain run of binary records. It has no
  header, no version and no locking, so two copies of the program must not
  share one file.
- There is no radix sort, and `count_sort` accepts integers only.