# drillkit

A collection of small, self-contained programming drills as a Python library:
array rearrangements, digit puzzles, text triangles, bit manipulation, file
statistics and a set of classic container types. It has no dependencies
beyond the standard library.

## Installation

    pip install .

To run the test suite:

    pip install .[test]
    pytest

## Interactive menu

The number and triangle exercises can be tried from an interactive menu that
reads from standard input:

    drillkit-menu

Pick an exercise by number (1-9, 0 exits), then enter the requested values.
The menu also stops when the input ends or a number was expected and
something else was typed. The same loop is available as
`drillkit.menu.run(input_stream, output_stream)`.

## Modules

- `drillkit.arrays` – `most_common`, `even_odd` (moves evens first, keeping
  order, and returns how many there are), `ascending_array`,
  `zeros_first_ones_last`. Lists are changed in place; empty input to
  `most_common` and `even_odd`, or anything but 0 and 1 given to
  `zeros_first_ones_last`, raises `ValueError`.
- `drillkit.numbers` – `arithmetic` (a named tuple of `total`, `difference`,
  `product`), `factorial`, `is_palindrome`, `is_ascending`, `is_prime`,
  `reverse`, `same_place` (Mastermind-style score: 10 per digit in place,
  1 per digit elsewhere), `is_armstrong`.
- `drillkit.shapes` – text triangles returned as strings: `right_triangle`,
  `inverted_triangle`, `arrow`, `pyramid`, `inverted_pyramid`, `diamond`.
- `drillkit.people` – `Person` records with `sort_by_id` / `sort_by_name`
  (1 to 100 people), and `DynamicArray`, an integer array whose `capacity`
  grows by a fixed block.
- `drillkit.bits` – `format_byte`, `invert_bits`, `rotate_right`, `set_bits`
  on bytes, and `reverse_bits` on 32-bit unsigned integers.
- `drillkit.files` – `last_lines(path, n)` returns the last lines of a text
  file; `count_stats(path)` returns a `FileStats` of lines, words and bytes.
- `drillkit.packing` – `reverse_bits_lut` (byte-table bit reversal),
  `compress_bitwise` / `compress_bitfield` packing letters a–o two to a byte
  (`CharPair`), and `bubble_sort(values, should_swap)` with the criteria
  `ascending`, `descending`, `by_absolute`, `evens_first`.
- `drillkit.bstree` – `BSTree` without duplicates, ordered by a comparator
  such as `natural_order`; `TreeIterator` moves with `next`/`prev`, reads
  with `get` and deletes with `remove`; `for_each` walks in any
  `TraversalMode` until the action returns a false value.
- `drillkit.vector` – `Vector` growing and shrinking in blocks, with
  indexing, `remove` from the back and `VectorFullError` when a fixed-size
  vector is full.
- `drillkit.stack` – `Stack` growing and shrinking in blocks
  (`StackEmptyError`, `StackFullError`), `check_balanced_brackets` and
  `evaluate_postfix` for single-digit operands.
- `drillkit.circular_queue` – bounded FIFO `Queue` of fixed size
  (`QueueOverflowError`, `QueueEmptyError`).
- `drillkit.dlist` – doubly linked `DList` with `ListIterator` and the
  range function `for_each(begin, end, action)`.
- `drillkit.hashmap` – separate-chaining `HashMap` with a prime bucket count,
  `insert`, `find`, `remove`, `rehash`, `for_each` and `statistics`
  (`MapStats`); inserting an existing key raises `DuplicateKeyError`.

## Example

```python
from drillkit.bstree import BSTree, natural_order
from drillkit.stack import evaluate_postfix

tree = BSTree(natural_order)
for value in (50, 30, 70, 20, 40, 60, 80):
    tree.insert(value)
print(list(tree))  # [20, 30, 40, 50, 60, 70, 80]

print(evaluate_postfix("235*+"))  # 17
```

## What it does not do

All containers live in memory only; nothing is saved to disk. The only
command is the interactive menu, which covers the number and triangle
exercises; the other modules are used from Python code.