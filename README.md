# algoset

A small library of solutions to well-known algorithm puzzles, grouped by
difficulty, together with the two data structures they use: a singly linked
list node and a binary max-heap. It depends only on the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `algoset.easy`

- `find_lucky(arr)` – the largest value whose number of occurrences equals the
  value itself, or `-1` if there is none.
- `kth_character(k)` – the k-th character (1-based) of the "string game"
  sequence: `'a'` shifted by the number of set bits in `k - 1`.
- `possible_string_count(word)` – `1` plus the number of adjacent equal
  character pairs in `word`.
- `find_lhs(nums)` – length of the longest harmonious subsequence (values
  differing by exactly one), `0` if there is none.
- `two_sum(nums, target)` – the indices `[i, j]` of two numbers adding up to
  `target`; raises `ValueError` when no pair exists.

### `algoset.medium`

- `add_two_numbers(l1, l2)` – sum of two numbers stored as linked lists of
  digits in reverse order, returned as a new list.
- `longest_palindrome(s)` – the first longest palindromic substring; `""` for
  an empty string.
- `length_of_longest_substring(s)` – length of the longest substring without
  repeated characters.
- `reverse_integer(x)` – `x` with its decimal digits reversed, keeping the
  sign; `0` if the reversed magnitude exceeds 2³¹ − 1.
- `convert(s, num_rows)` – the string written in a zigzag over `num_rows`
  rows, then read row by row.

### `algoset.hard`

- `kth_character(k, operations)` – the k-th character (1-based) after a series
  of operations, where `0` appends a copy and `1` appends a shifted copy.
- `possible_string_count(word, k)` – the number of original strings of length
  at least `k` that could have been typed as `word`, modulo 1 000 000 007.
- `find_median_sorted_arrays(nums1, nums2)` – median of two sorted lists as a
  `float`; raises `ValueError` if both are empty.
- `merge_k_lists(lists)` – merge sorted linked lists (entries may be `None`)
  into one ascending linked list, or `None` if there are no values.
- `is_match(s, p)` – whole-string matching against a pattern supporting `.`
  (any character) and `*` (zero or more of the preceding element).
- `reverse_k_group(head, k)` – reverse the list's nodes in groups of `k`,
  leaving a shorter final group as it is; `k <= 1` returns the list unchanged.

### Data structures

- `algoset.linked_list.ListNode` – a dataclass with fields `val` and `next`.
  `ListNode.from_iterable(values)` builds a list (returning `None` for no
  values), iterating a node yields the values from it to the end, and
  `to_list()` returns them as a list.
- `algoset.heap.MaxHeap` – a binary max-heap with `push(value)`, `pop()`
  (the largest value, or `None` when empty), `len()` and truthiness.

## Example

```python
from algoset.easy import two_sum
from algoset.medium import add_two_numbers, convert
from algoset.hard import merge_k_lists, is_match
from algoset.linked_list import ListNode

two_sum([2, 7, 11, 15], 9)                     # [0, 1]
convert("PAYPALISHIRING", 3)                   # "PAHNAPLSIIGYIR"

total = add_two_numbers(ListNode.from_iterable([2, 4, 3]),
                        ListNode.from_iterable([5, 6, 4]))
total.to_list()                                # [7, 0, 8]

merged = merge_k_lists([ListNode.from_iterable([1, 4, 5]),
                        ListNode.from_iterable([1, 3, 4]),
                        ListNode.from_iterable([2, 6])])
list(merged)                                   # [1, 1, 2, 3, 4, 4, 5, 6]

is_match("aa", "a*")                           # True
```

## Scope

This is a library only: it has no command-line tool, and the functions work
on values passed in rather than reading input from files or the terminal.