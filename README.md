# optifier

`optifier` builds a *partial* version of a dataclass. The partial class has the
same fields, and every field is optional with a default of `None`. A field that
is already optional (`Optional[T]`, `Union[T, None]` or `T | None`) keeps its
annotation. Every other field `T` becomes `Optional[T]`.

This suits layered configuration. You collect pieces of a settings object from
several sources, such as defaults, a file, the environment or the command line.
You merge the pieces, and then you build the complete object. That last step
raises a clear error if a required value is still missing.

## Installation

```
pip install optifier
```

## Usage

```python
from dataclasses import dataclass
from typing import Optional

from optifier.partial import PartialError, partial, try_from_partial


@partial(derive=("repr", "eq"))
@dataclass
class Foo:
    a: int
    b: Optional[str]
    c: list[int]


left = Foo.Partial(a=1, b="left")
right = Foo.Partial(a=2, b="right", c=[3, 4, 5])

merged = left.merge(right)
# Fields set on the left side win; unset ones are taken from the right.
assert merged == Foo.Partial(a=1, b="left", c=[3, 4, 5])

foo = try_from_partial(Foo, merged)        # or: merged.into_complete()
assert foo == Foo(a=1, b="left", c=[3, 4, 5])

try:
    Foo.Partial(b="hello", c=[1]).into_complete()
except Foo.PartialError.AMissing as err:
    print(err)                             # Field `a` is missing
    print(err.field, err.variant)          # a AMissing
```

### How it behaves

- `partial` (module `optifier.partial`) is a class decorator for dataclasses. It
  can be used bare (`@partial`) or with options (`@partial(derive=...)`). It
  returns the decorated class unchanged apart from two new attributes:
  - `cls.Partial`: a dataclass named `<Name>Partial`, a subclass of `PartialBase`.
    It also carries the error class as `cls.Partial.Error`.
  - `cls.PartialError`: an exception class named `<Name>PartialError`, a subclass
    of `PartialError`.
- Fields declared with `init=False` are left out of the partial class.
- `derive` chooses the dataclass features of the partial class. It takes one
  name or several, from `repr`, `eq`, `order`, `frozen` and `hash`. None is
  switched on by default, so without `eq` two partials compare by identity. An
  unknown name raises `ValueError`.
- Applying `partial` to something that is not a class, or to a class that is not a
  dataclass, raises `TypeError`.
- `PartialBase.merge(other)` returns a new partial. For each field it keeps its own
  value unless that value is `None`, in which case it takes the value from
  `other`. Merging partials of different classes raises `TypeError`.
- `PartialBase.into_complete()` and `try_from_partial(cls, value)` build the
  complete object. Every field whose annotation in the decorated class was not
  optional must be set. If one is `None`, the error for that field is raised;
  fields checked in declaration order, the first missing one wins. Fields that
  were optional may stay `None`. `try_from_partial` raises `TypeError` if `cls`
  was not decorated with `partial`, or if `value` is not an instance of
  `cls.Partial`.
- Each required field has its own error subclass, reachable as an attribute of
  the error class, for example `Foo.PartialError.AMissing`. All of them are
  listed in `Foo.PartialError.variants`. An instance has `field` (the field name)
  and `variant` (the subclass name), and its message is ``Field `a` is missing``.
  If two fields would give the same error name, decoration raises `TypeError`.
- The error name is the field name in PascalCase followed by `Missing`: `user_id`
  becomes `UserIdMissing`. The helpers `optifier.naming.to_pascal_case` and
  `optifier.naming.missing_variant_name` build these names.
- `is_optional_type(tp)` tells whether an annotation already admits `None`. It
  understands `Optional[...]`, `Union[..., None]`, `X | None`, `Annotated[...]`
  wrappers and annotations written as strings.

## Playground

A short demonstration builds two partials of a three-field class, merges them,
prints the merged value to standard error and tries the conversion:

```
optifier-playground
```

Both partials leave `field_string` unset, so the command prints
`Field 'field_string' is missing` and exits with status 1.