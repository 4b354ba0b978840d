# lazypipes

Lazy adapters for iterables. You chain them with the `|` operator.
Nothing is computed until you iterate over the result.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and then run `pytest`.

## Usage

```python
from lazypipes.adapters import Filter, Transform, Take, Drop, Reverse, Keys, Values

numbers = [1, 2, 3, 4, 5, 6]

odd_squares = numbers | Filter(lambda x: x % 2) | Transform(lambda x: x * x)
list(odd_squares)                          # [1, 9, 25]

list(numbers | Take(4))                    # [1, 2, 3, 4]
list(numbers | Drop(2))                    # [3, 4, 5, 6]
list(numbers | Reverse())                  # [6, 5, 4, 3, 2, 1]
list(numbers | Reverse() | Take(3))        # [6, 5, 4]

names = {1: "one", 2: "two", 3: "three"}
list(names | Keys())                       # [1, 2, 3]
list(names | Values())                     # ['one', 'two', 'three']
```

Every adapter returns a `LazyView`. A view can be iterated more than once.
Each pass reads the source again. You can also call `adapter.apply(source)`
directly instead of using `|`.

The adapters read a mapping as its `(key, value)` items. For example,
`{1: "a"} | Take(1)` yields `(1, "a")`.

## Adapters

| Adapter           | What it yields                                                 |
|-------------------|----------------------------------------------------------------|
| `Filter(pred)`    | items for which `pred(item)` is truthy                         |
| `Transform(func)` | `func(item)` for each item                                     |
| `Take(n)`         | at most the first `n` items                                    |
| `Drop(n)`         | everything after the first `n` items                           |
| `Reverse()`       | items in reverse order                                         |
| `Keys()`          | keys of a mapping, or first members of an iterable of pairs    |
| `Values()`        | values of a mapping, or second members of an iterable of pairs |

## Errors

- `Filter` and `Transform` raise `TypeError` when they are not given a callable.
- `Take` and `Drop` raise `TypeError` when the count is not an integer, and
  `ValueError` when it is negative.
- `Reverse` raises `TypeError` when it is applied to a source that
  `reversed()` does not accept, such as a generator.
- `Keys` and `Values` raise `TypeError` during iteration when they reach an
  item that is not a 2-tuple.

## Demo

```
lazypipes-demo
```

This prints a short tour of the adapters, applied to a small list and a small
mapping. The same text is returned as a string by
`lazypipes.demo.render_demo()`.