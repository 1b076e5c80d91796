# algoshelf

A small collection of classic algorithms and data structures, written as
plain Python for reading, teaching and experimenting. It has no
dependencies beyond the standard library.

## What is on the shelf

### Sorting

Every sort takes an iterable and returns a new ascending list.

- `algoshelf.heap_sort`: `heap_sort` builds the heap bottom-up;
  `heap_sort_incremental` builds it by pushing elements one at a time.
- `algoshelf.insertion_sort`: `insertion_sort`, `insertion_sort_recursive`.
- `algoshelf.merge_sort`: `merge_sort` (recursive), `merge_sort_bottom_up`,
  and `merge_passes`, a generator yielding the list after each bottom-up
  pass.
- `algoshelf.exchange_sorts`: `odd_even_sort`, `pancake_sort`,
  `partition_sort` (quicksort with Hoare partitioning) and
  `pigeonhole_sort` (integers only).
- `algoshelf.patience_sort`: `patience_sort`.
- `algoshelf.quick_sort`: `quick_sort` (last element as pivot) and
  `random_quick_sort(values, rng=None)`, which takes an optional
  `random.Random` for its pivot choices.
- `algoshelf.radix_sort`: `radix_sort`, `counting_radix_sort` and
  `radix_passes`, for non-negative integers; negative values raise
  `ValueError`, non-integers `TypeError`.
- `algoshelf.multikey`: `multikey_quicksort(strings, rng=None)` and
  `multikey_quicksort_fast(strings)` for strings, plus
  `TernarySearchTree`, a set of strings supporting `insert`, `in`, `len`,
  `partial_match(pattern)` (where `.` matches any one character) and
  `near_words(word, distance)`.

### Searching

- `algoshelf.searching`: `linear_search` (returns a bool), `find_all`
  (every matching index), and `binary_search`, `interpolation_search`,
  `jump_search` on ascending sequences, each returning an index or `None`.
  `matrix_search(matrix, key)` finds `(row, column)` in a matrix sorted
  along rows and columns.
- `algoshelf.patterns`: `naive_search(text, pattern)` and
  `rabin_karp_search(text, pattern, radix=256, prime=29)` return every
  index where the pattern starts.

### Arrays, graphs and expressions

- `algoshelf.array_utils`: `find_candidate` and `majority_element`
  (Moore's voting algorithm), `odd_occurrence` (XOR of all values), and
  `insert_at(values, value, position)` with a 1-based position.
- `algoshelf.spanning_tree`: `prim_mst` and `greedy_mst` take an
  adjacency matrix where 0 means no edge and return a `SpanningTree`
  holding its `edges` as `(from, to, cost)` with 0-based vertices and its
  total `cost`.
- `algoshelf.brackets`: `is_balanced` checks strings of `()`, `[]`, `{}`.
- `algoshelf.postfix`: `infix_to_postfix` converts expressions with
  single-letter or single-digit operands and the operators `^ * / + -`;
  malformed input raises `ExpressionError`. `is_operator` and
  `precedence` are available too.

### Data structures

- `algoshelf.linked_list`: `LinkedList` with 1-based positions
  (`push_front`, `append`, `insert_after`, `pop_front`, `pop_back`,
  `remove_after`, `position`, `sort`, `middle`), its `Node`, and
  `interleave(first, second)`, which splices the nodes of two lists
  alternately into the first.
- `algoshelf.stack`: `ArrayStack`, bounded by `capacity` (100 by default);
  pushing onto a full stack raises `OverflowError`, and `update(position,
  value)` counts from the top.
- `algoshelf.queues`: `Queue` with `enqueue` and `dequeue`.
- `algoshelf.binary_heap`: `MaxHeap` and `MinHeap` with `push`, `pop`,
  `top` and `len`; an empty heap raises `IndexError`.
- `algoshelf.red_black_tree`: `RedBlackTree` with `insert`, `delete`
  (raising `KeyError` for an absent value), `inorder` giving
  `(value, Color)` pairs, and `black_heights`; nodes are `RBNode`.
- `algoshelf.word_count`: `WordTree` and `WordNode`, `read_words`,
  `build_word_tree` and `write_word_counts`.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## A quick look

```python
from algoshelf.merge_sort import merge_sort
from algoshelf.searching import binary_search
from algoshelf.brackets import is_balanced
from algoshelf.postfix import infix_to_postfix
from algoshelf.binary_heap import MaxHeap

print(merge_sort([15, 14, 13, 12, 11]))   # [11, 12, 13, 14, 15]
print(binary_search([5, 8, 10, 14, 16], 5))  # 0
print(is_balanced("{[()]}"))              # True
print(infix_to_postfix("a+b*c"))          # abc*+

heap = MaxHeap()
for value in (10, 3, 2, 8):
    heap.push(value)
print(heap.top(), len(heap))              # 10 4
```

## Counting words

The package installs one command, `algoshelf-wordcount`:

```
algoshelf-wordcount [input] [output]
```

It reads `input` (default `file.txt`), splits it into lower-cased words
made of ASCII letters (an apostrophe or hyphen directly after a letter is
kept, a trailing hyphen dropped) and appends to `output` (default
`wordcount.txt`) a table of each distinct word with its frequency, in
alphabetical order. It exits with status 1 if a file cannot be opened.

## What it does not do

The data structures are library classes only: there are no interactive
menus or prompts for the lists, stack, queue, heaps or trees, and
`algoshelf-wordcount` is the only command.