# algoshelf

A collection of small, classic algorithms written as plain Python functions.
Nothing here needs third-party libraries.

## Installation

```
pip install algoshelf
```

## What is inside

- `algoshelf.sorting` has `bucket_sort` for values in [0, 1), `insertion_sort`, `bubble_sort`, `counting_sort` for non-negative integers, `merge_sort`, `selection_sort`, and `k_sort` for input where each element is at most `k` places from its sorted position. Every function returns a new list.
- `algoshelf.numeric` has `count_digits`, `digit_sum`, `factorial`, `n_choose_r`, `is_power_of_two`, `reverse_digits`, `reverse_four_digit`, `is_cube_armstrong`, `is_armstrong`, `is_palindrome_number`, `binary_to_decimal`, `fibonacci`, `swap_arithmetic`, `swap_xor`, `rectangle_area` and `count_up`.
- `algoshelf.text` has `distinct_characters`, `is_palindrome`, `permutations` (a generator), `longest_line`, `alphabet_triangle` and `concatenate`.
- `algoshelf.huffman` has `HuffmanNode`, `huffman_tree` and `huffman_codes`.
- `algoshelf.matrices` has `rotate_anticlockwise` for square matrices and `format_matrix`, which renders rows of tab-separated values.
- `algoshelf.combinations` has `subsets` (a generator over all 2**n subsets, starting with the empty one), `two_sum` and `four_sum`.
- `algoshelf.scheduling` has `round_robin`, which returns a `Schedule`. A `Schedule` holds `ProcessResult` entries in completion order and has `average_waiting` and `average_turnaround`.
- `algoshelf.quadratic` has `solve_quadratic`, which returns `Roots` with `x1`, `x2`, `is_real` and `is_repeated`. Complex roots come back as `complex` values.
- `algoshelf.excuses` has `generate_excuse`, which returns a random excuse of the kind a programmer might give. It accepts any object with a `choice` method, such as `random.Random`.
- `algoshelf.linkedlist` has a minimal singly linked `LinkedList` built from `Node` objects. It supports `append`, iteration and `len`.

Invalid input raises `ValueError`. Examples are a negative factorial, a bucket-sort value outside [0, 1), a non-square matrix or `a == 0` in `solve_quadratic`.

## Examples

```python
from algoshelf.sorting import merge_sort, k_sort
from algoshelf.huffman import huffman_codes
from algoshelf.combinations import two_sum

merge_sort([5, 2, 9, 1])           # [1, 2, 5, 9]
k_sort([6, 5, 3, 2, 8, 10, 9], 3)  # [2, 3, 5, 6, 8, 9, 10]
huffman_codes("ABCDF", [5, 1, 2, 4, 10])
# {'F': '0', 'A': '10', 'B': '1100', 'C': '1101', 'D': '111'}
two_sum([2, 7, 11, 15], 9)         # (0, 1)
```

```python
from algoshelf.scheduling import round_robin

schedule = round_robin(arrivals=[0, 1, 2], bursts=[5, 3, 1], quantum=2)
for result in schedule.results:
    print(result.process, result.turnaround, result.waiting)
print(schedule.average_waiting, schedule.average_turnaround)
```

```python
import random
from algoshelf.excuses import generate_excuse

print(generate_excuse(random.Random()))
```

## What it does not do

This is a library only. It installs no command-line programs and does not read from standard input. To run an algorithm on your own data, call its function from Python.

## Running the tests

```
pip install -e .[test]
pytest
```