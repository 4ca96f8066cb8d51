# akrt

A small runtime support library. It offers the building blocks that the
runtime of a compiled program expects, and builds them from plain Python
objects. It has no dependencies outside the standard library.

## Modules

- `akrt.runtime` holds `panic`, which prints `Panic: <message>` to standard
  output and raises `Panic`, and `verify`, which raises `VerificationError`
  when a condition is false. `dbgputstr` writes text to standard error.
  `run_main(entry, argv)` calls `entry` with the argument list (by default
  `sys.argv`) and returns its exit code. If `entry` raises an ordinary
  exception, `run_main` prints `Runtime error: ...` to standard error and
  returns 1. `Panic` and `VerificationError` pass through unchanged.
- `akrt.integers` holds the fixed-width integer kinds of `IntKind` (`I8` to
  `I64` and `U8` to `U64`, each with `min`, `max` and `contains`). It has
  checked arithmetic (`checked_add`, `checked_sub`, `checked_mul`,
  `checked_div`, `checked_mod`), which panics on overflow or division by
  zero. It has `arithmetic_shift_right` and four integer casts:
  `fallible_integer_cast`, `infallible_integer_cast`,
  `saturating_integer_cast` and `truncating_integer_cast`. It also holds
  `TriState` and the helpers `round_up_to_power_of_two`, `is_power_of_two`,
  `ceil_div`, `clamp`, `mix`, `explode_byte` and `align_up_to`.
- `akrt.hashing` holds `string_hash` and `case_insensitive_string_hash`. These
  are 32-bit one-at-a-time hashes of bytes. Text is hashed as UTF-8.
- `akrt.unicode` holds `code_point_to_utf8`, which encodes one code point as
  `bytes`.
- `akrt.optional` holds `Optional`, a container that holds one value or
  nothing. An `Optional` that holds `None` is not the same as an empty one.
- `akrt.result` holds `Result`, which carries either a value or an error, and
  `must`, which returns the value and verifies that the result is not an error.
- `akrt.guards` holds the context managers `ScopeGuard` and `ArmedScopeGuard`.
  Each runs a callback when its block is left. `ArmedScopeGuard.disarm()`
  cancels the callback.
- `akrt.tuples` holds `Tuple`, a fixed-size tuple whose elements can be
  replaced. Elements are read by index with `get` or by exact type with
  `get_by_type`. The module also holds `for_each_type` and
  `for_each_type_zipped`.
- `akrt.variant` holds `Variant`, a tagged union over a fixed set of types,
  and `Empty`.
- `akrt.span` holds `Span`, a bounds-checked window over a mutable sequence.
  Writes through a span change the sequence it views.
- `akrt.storage` holds `VectorStorage`, which stores elements with a capacity
  that grows ahead of the size, and `padded_capacity`.
- `akrt.vector` holds `Vector`, a bounds-checked growable sequence built on
  `VectorStorage`.

## Installation

```
pip install .
```

## Examples

Checked arithmetic panics on overflow:

```python
from akrt.integers import IntKind, checked_add
from akrt.runtime import Panic

checked_add(100, 27, IntKind.I8)      # 127
try:
    checked_add(100, 28, IntKind.I8)  # also prints "Panic: ..." to stdout
except Panic as exc:
    print(exc.message)  # Overflow in checked addition '100 + 28'
```

Optionals and results:

```python
from akrt.optional import Optional
from akrt.result import Result, must

name = Optional("ada")
name.value_or("anonymous")   # "ada"
Optional().value_or("anonymous")  # "anonymous"

must(Result(42))             # 42
Result(error="bad input").is_error()  # True
```

Scope guards run their callback when the block ends:

```python
from akrt.guards import ArmedScopeGuard

with ArmedScopeGuard(lambda: print("rolled back")) as guard:
    guard.disarm()           # nothing is printed
```

Variants hold exactly one value of one of their types:

```python
from akrt.variant import Variant

v = Variant(int, str, value=5)
v.has(int)                                  # True
v.visit((str, str.upper), lambda x: x * 2)  # 10
v.set("hi")
v.visit((str, str.upper), lambda x: x * 2)  # "HI"
```

Vectors and spans:

```python
from akrt.vector import Vector

v = Vector([1, 2, 3])
v.append(4)
v.capacity()           # 9: the capacity grows with padding
v.span().slice(1, 2).fill(0)
v                      # Vector([1, 0, 0, 4])
v.find_first_index(4)  # Optional(3)
```

Running a program entry point:

```python
from akrt.runtime import run_main

def entry(args):
    return len(args)

run_main(entry, ["prog", "a", "b"])  # 3
```

## What is not included

The package has no reference counting and no owning or weak pointer types.
Python's own references and the standard `weakref` module cover those needs.

## Running the tests

```
pip install .[test]
pytest
```