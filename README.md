# algobox

A collection of small, classic algorithms written as plain Python functions
and classes: number puzzles, base conversions, sorts, searches, string
utilities, a growable array and linked lists. Each routine is short and
readable, and there are no dependencies outside the standard library.

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

| Module                 | Contents |
|------------------------|----------|
| `algobox.numbers`      | `is_armstrong`, `fibonacci`, `fibonacci_sequence`, `factorial`, `gcd`, `is_prime`, `is_leap_year`, `is_even`, `binpow`, `nth_term`, `max_subarray_sum`, `Matrix2x2`, `ArithmeticResult`, `arithmetic`, `calculate`, `simple_interest`, `fahrenheit_to_celsius` |
| `algobox.conversions`  | `octal_to_binary`, `decimal_to_binary`, `to_base`, `roman_to_int`, `add_binary`, `to_lower_ascii` |
| `algobox.patterns`     | `christmas_tree`, `number_pattern`, `fibonacci_triangle`, `cosine_table`, `format_cosine_table` |
| `algobox.sorting`      | `merge_sort`, `insertion_sort`, `selection_sort`, `shell_sort`, `quick_sort`, `bubble_sort`, `exchange_sort` |
| `algobox.searching`    | `binary_search`, `linear_search`, `fibonacci_search` |
| `algobox.graphs`       | `floyd_warshall`, `format_distance_matrix`, `INF` |
| `algobox.text`         | `reverse_string`, `reverse_sentence`, `word_count`, `truncated_concat`, `replace_characters`, `substring`, `longest_common_subsequence`, `evaluate_postfix` |
| `algobox.vector`       | `Vector`, a growable array that doubles its capacity when full and halves it when a quarter full |
| `algobox.singly`       | `Node`, `SinglyLinkedList`, `has_cycle`, `merge_sorted` |
| `algobox.doubly`       | `DNode`, `DoublyLinkedList` |
| `algobox.circular`     | `SortedCircularList` |
| `algobox.cli`          | `main`, the `algobox` command |

Some conventions that hold throughout:

- The sorting functions accept any iterable and return a new list; the input
  is left untouched.
- The searches return the zero-based index of a match, or `None` when the
  target is absent.
- Invalid input raises `ValueError` (for example `factorial(-1)`,
  `roman_to_int("Z")` or `substring("abc", 2, 5)`); integer division by zero
  raises `ZeroDivisionError`.
- `calculate` and `evaluate_postfix` truncate division toward zero.

## Examples

```python
from algobox.numbers import is_armstrong, gcd, factorial, Matrix2x2
from algobox.conversions import roman_to_int, to_base
from algobox.sorting import merge_sort
from algobox.text import longest_common_subsequence, evaluate_postfix

is_armstrong(153)                            # True
gcd(12, 18)                                  # 6
factorial(5)                                 # 120
Matrix2x2(1, 2, 3, 4).determinant()          # 1*4 - 3*2 == -2
roman_to_int("MCMXCIV")                      # 1994
to_base(255, 16)                             # "FF"
merge_sort([6, 5, 12, 10, 9, 1])             # [1, 5, 6, 9, 10, 12]
longest_common_subsequence("ACADB", "CBDA")  # "CB"
evaluate_postfix("23*4+")                    # 10
```

Linked lists behave like ordinary Python sequences for iteration and length:

```python
from algobox.singly import SinglyLinkedList, merge_sorted
from algobox.doubly import DoublyLinkedList

items = SinglyLinkedList([7, 11, 41, 66])
items.push_front(1)
items.append(99)
list(items)                          # [1, 7, 11, 41, 66, 99]
len(items)                           # 6
list(merge_sorted([1, 4], [2, 3]))   # [1, 2, 3, 4]

chain = DoublyLinkedList([1, 2, 3])
chain.reverse()
list(chain)                          # [3, 2, 1]
list(reversed(chain))                # [1, 2, 3]
```

`SortedCircularList.take(count)` reads round the ring as many times as
needed:

```python
from algobox.circular import SortedCircularList

ring = SortedCircularList([5, 1, 3])
ring.take(5)   # [1, 3, 5, 1, 3]
```

Shortest paths between every pair of vertices, with `INF` (999) standing for
a missing edge:

```python
from algobox.graphs import INF, floyd_warshall, format_distance_matrix

graph = [
    [0, 3, INF, 5],
    [2, 0, INF, 4],
    [INF, 1, 0, INF],
    [INF, INF, 2, 0],
]
print(format_distance_matrix(floyd_warshall(graph)))
```

## Command line

Installing the package provides an `algobox` command. Each call runs one
operation, given as a subcommand with its arguments:

```
algobox length hello            # The length of the string 'hello' is 5
algobox copy hello world        # After copying 'world'
algobox concat hello world      # The concatenated string is 'hellowor'
algobox reverse hello           # The reversed string is olleh
algobox replace hello lo LO     # The replaced string is --> heLLO
algobox substring algorithm 3 4 # The sub string is gori
algobox calc 7 / 2              # The division of 7 and 2 is 3
```

`concat` appends at most one character fewer than the length of the first
string. `substring` takes a 1-based position. `calc` accepts `+`, `-`, `*`
and `/`; quote `*` so the shell does not expand it. On invalid input the
command prints the error to standard error and exits with status 1.

## What it does not do

The `algobox` command is not interactive: it does not show a menu or prompt
for input, and it keeps no state between calls. The other tools are library
functions only and have no command of their own.