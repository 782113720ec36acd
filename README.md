# orderbag

`orderbag` provides `Container`, a small bag of comparable items. It keeps
items in insertion order, allows duplicates, and can be walked in several
orders:

| Method                | Iterator class     | Order                                                   |
|-----------------------|--------------------|---------------------------------------------------------|
| `order()`             | `Order`            | insertion order                                         |
| `ascending_order()`   | `AscendingOrder`   | smallest to largest                                     |
| `descending_order()`  | `DescendingOrder`  | largest to smallest                                     |
| `reverse_order()`     | `ReverseOrder`     | reverse insertion order                                 |
| `side_cross_order()`  | `SideCrossOrder`   | smallest, largest, second smallest, second largest, ... |
| `middle_out_order()`  | `MiddleOutOrder`   | element at index `len // 2` first, then one step left, one step right, and so on |

## Installation

```
pip install .
```

## Usage

```python
from orderbag.container import Container

bag = Container([7, 15, 6, 1, 2])
print(len(bag))                        # 5
print(bag)                             # {7, 15, 6, 1, 2}

list(bag.ascending_order())            # [1, 2, 6, 7, 15]
list(bag.descending_order())           # [15, 7, 6, 2, 1]
list(bag.side_cross_order())           # [1, 15, 2, 7, 6]
list(bag.reverse_order())              # [2, 1, 6, 15, 7]
list(bag.order())                      # [7, 15, 6, 1, 2]
list(bag.middle_out_order())           # [6, 15, 1, 7, 2]

bag.add(2)
bag.add(2)
bag.remove(2)                          # removes every 2
print(bag)                             # {7, 15, 6, 1}

bag.remove(2)                          # raises ValueError: the item is absent
```

`Container` also supports `iter()` (insertion order) and `copy()`, which
returns an independent container holding the same items.

Items must support `<` for the sorted orders: integers, floats, strings and
so on.

## Iterators

The iterator classes live in `orderbag.orders`. Each one is a regular Python
iterator and raises `ValueError` if given `None` instead of a container.

- `Order` walks the container itself, so it sees the container as it is
  while iterating.
- `AscendingOrder`, `DescendingOrder`, `ReverseOrder`, `SideCrossOrder` and
  `MiddleOutOrder` take a snapshot of the items when created; later changes
  to the container do not affect them.

Two iterators of the same class compare equal when they are at the same
position over the same items (for `Order`, the same container object).
`copy()` returns an independent iterator at the same position.

```python
from orderbag.container import Container

it = Container([3, 1, 2]).ascending_order()
next(it)                               # 1
clone = it.copy()
next(it), next(clone)                  # (2, 2)
```

## Demonstration

A walkthrough that prints every order for sample integer, string and float
containers, together with adding and removing duplicates:

```
orderbag-demo
```

The same is available as `python -m orderbag.demo`. It takes no options
besides `--help`.

## Running the tests

```
pip install .[test]
pytest
```