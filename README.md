# drillkit

A small collection of plain, predictable routines for everyday programming
drills: integer arithmetic, sorting and searching, text checks, fixed-length
tables, matrices stored as lists of rows, and a bounded registry of people.

Everything is pure Python with no third-party dependencies. Functions that
change a table or matrix return a new list and leave their input untouched.
Searches return `None` when nothing is found.

## Installation

```
pip install drillkit
```

To run the test suite as well:

```
pip install "drillkit[test]"
pytest
```

## What is inside

### `drillkit.arithmetic`

- `pgcd(a, b)`: greatest common divisor of two positive integers.
- `ppcm(a, b)`: least common multiple of two positive integers.
- `is_perfect(n)`: whether the divisors of `n` below `n` add up to `n`.
  Zero has no such divisors and so counts as perfect; negative numbers never do.
- `is_prime(n)`: whether no integer from 2 to `n - 1` divides `n`. Numbers
  below 2 have nothing to test against and so count as prime.

`pgcd` and `ppcm` raise `ValueError` for zero or negative arguments.

```python
from drillkit.arithmetic import pgcd, ppcm, is_perfect, is_prime

pgcd(12, 18)      # 6
ppcm(4, 6)        # 12
is_perfect(28)    # True
is_prime(17)      # True
```

### `drillkit.sorting`

- `bubble_sort(values)`, `insertion_sort(values)`, `selection_sort(values)`:
  take any iterable and return a new list in ascending order.
- `binary_search(values, key)`: index of `key` in an ascending sequence, or
  `None` when it is absent.

```python
from drillkit.sorting import bubble_sort, binary_search

bubble_sort([5, 1, 4, 2, 3])               # [1, 2, 3, 4, 5]
binary_search([1, 2, 3, 4, 5, 6, 7], 5)    # 4
binary_search([1, 3, 5], 4)                # None
```

### `drillkit.text`

- `strings_equal(first, second)`: exact comparison of two strings.
- `count_words_phrases(text)`: a frozen `TextCounts` with `words` (the number
  of spaces, tabs and newlines plus one) and `phrases` (the number of full
  stops).
- `is_palindrome(text)`: whether the text reads the same backwards.
- `find_word(text, word)`: position of `word` among the space-separated words
  of `text`, runs of spaces counting as one separator; `None` when absent.

```python
from drillkit.text import count_words_phrases, find_word, is_palindrome

counts = count_words_phrases("One two. Three.")
counts.words                       # 3
counts.phrases                     # 2
is_palindrome("radar")             # True
find_word("the quick  fox", "fox") # 2
```

### `drillkit.table`

Operations on a list of integers. Index arguments outside the list raise
`IndexError`.

- `insert_at(table, value, index)`: insert at `index`, keeping the length
  fixed, so the last element falls off.
- `delete_at(table, index)`: remove one element, later elements moving left.
- `edit_at(table, index, value)`: replace one element.
- `search_table(table, value)`: index of the first equal element, or `None`.
- `table_average(values)`: integer mean, truncated toward zero; `ValueError`
  for an empty table.
- `fill_table(n, values)`: the first `n` values as a list; `ValueError` when
  there are fewer.

```python
from drillkit.table import insert_at, table_average

insert_at([1, 2, 3, 4, 5], 9, 1)   # [1, 9, 2, 3, 4]
table_average([1, 2, 4])           # 2
```

### `drillkit.matrix`

Operations on rectangular matrices given as lists of rows; rows of unequal
length raise `ValueError`.

- `set_element(matrix, row, col, value)`: copy with one cell replaced;
  `IndexError` for a position outside the matrix.
- `delete_row(matrix, row)`: copy without the given row.
- `total_and_average(matrix)`: `(total, mean)` of all cells; `ValueError`
  for an empty matrix.
- `fill_matrix(n, values)`: an `n` by `n` matrix filled row by row.
- `sort_pass(matrix)`: one bubble-sort pass over the cells in row-major order;
  the largest value ends in the last cell, but the matrix is not fully sorted.
- `search_matrix(matrix, value)`: row-major index of the first matching cell,
  or `None`.
- `format_matrix(matrix)`: each value followed by a space, one row per line.

```python
from drillkit.matrix import format_matrix, search_matrix, sort_pass

sort_pass([[4, 2, 3], [7, 5, 6], [1, 8, 9]])
# [[2, 3, 4], [5, 6, 1], [7, 8, 9]]
search_matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]], 5)   # 4
format_matrix([[1, 2], [3, 4]])                       # "1 2 \n3 4 \n"
```

### `drillkit.people`

- `Person`: a dataclass with `name` and `age`.
- `parse_person(text)`: read a name and an integer age separated by
  whitespace; `ValueError` when either is missing or the age is not a number.
- `format_person(person)`: `"Name: <name>, Age: <age>"`.
- `PeopleRegistry(people=(), capacity=10)`: an ordered collection holding at
  most `capacity` people, with
  - `add(name, age)`: append and return a new `Person`; `ValueError` when full,
  - `edit(index, name, age)`: replace an entry; `IndexError` for a bad index,
  - `find(name)`: index of the first person with that name, or `None`,
  - `sort_by_age()`: stable sort by ascending age,
  - iteration and `len()`.

```python
from drillkit.people import PeopleRegistry, format_person, parse_person

registry = PeopleRegistry()
registry.add("John", 20)
registry.add("Jane", 22)
registry.find("Jane")                      # 1
format_person(parse_person("Alice 21"))    # "Name: Alice, Age: 21"
```

## Command line

Installing the package provides a `drillkit` command with three
sub-commands:

```
drillkit prime 17
17 is a prime number.

drillkit palindrome radar
The string is a palindrome.

drillkit search 7
The key 7 was found at index 6

drillkit search 4 --values 1 3 5
The key 4 was not found
```

`search` looks through the integers 1 to 10 unless `--values` gives other
ascending integers.

## What it does not do

The package is a library of functions plus the three command-line checks
above. It does not prompt for input interactively, offers no menu-driven
program, and keeps nothing on disk: tables, matrices and registries live only
in memory for as long as your program holds them.