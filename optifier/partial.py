"""Derive ``*Partial`` companions of dataclasses with every field optional."""

from __future__ import annotations

import dataclasses
import types
import typing
from collections.abc import Iterable
from typing import Any, Optional, Union

from .naming import missing_variant_name

_DERIVE_FLAGS = {
    "repr": "repr",
    "eq": "eq",
    "order": "order",
    "frozen": "frozen",
    "hash": "unsafe_hash",
}


class PartialError(Exception):
    """Raised when a partial value lacks a field the complete type requires."""

    field: str = ""
    variant: str = ""

    def __init__(self, message: str | None = None) -> None:
        if message is None:
            message = f"Field `{self.field}` is missing"
        super().__init__(message)


class PartialBase:
    """Base class of every generated ``*Partial`` dataclass."""

    __complete__: type
    _required: typing.Mapping[str, type[PartialError]]

    def merge(self, other: PartialBase) -> PartialBase:
        """Return a new partial taking each field from ``self`` unless it is ``None``."""
        if type(other) is not type(self):
            raise TypeError(
                f"cannot merge {type(self).__name__} with {type(other).__name__}"
            )
        values = {
            f.name: _first_present(getattr(self, f.name), getattr(other, f.name))
            for f in dataclasses.fields(self)
        }
        return type(self)(**values)

    def into_complete(self) -> Any:
        """Build the complete value, raising the matching error if a field is missing."""
        return try_from_partial(self.__complete__, self)


def _first_present(left: Any, right: Any) -> Any:
    return left if left is not None else right


def _split_top_level(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator`` outside of square brackets."""
    parts: list[str] = []
    current: list[str] = []
    depth = 0
    for char in text:
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
        if char == separator and depth == 0:
            parts.append("".join(current).strip())
            current = []
        else:
            current.append(char)
    parts.append("".join(current).strip())
    return parts


def _is_optional_text(text: str) -> bool:
    text = text.strip()
    head, bracket, rest = text.partition("[")
    if bracket and text.endswith("]"):
        name = head.strip().rsplit(".", 1)[-1]
        if name == "Optional":
            return True
        if name == "Union":
            return "None" in _split_top_level(rest[:-1], ",")
    parts = _split_top_level(text, "|")
    return len(parts) > 1 and "None" in parts


def is_optional_type(tp: Any) -> bool:
    """Tell whether an annotation already admits ``None`` (``Optional[X]``, ``X | None``)."""
    if isinstance(tp, str):
        return _is_optional_text(tp)
    if isinstance(tp, typing.ForwardRef):
        return _is_optional_text(tp.__forward_arg__)
    origin = typing.get_origin(tp)
    if origin is typing.Annotated:
        return is_optional_type(typing.get_args(tp)[0])
    if origin is Union or origin is types.UnionType:
        return type(None) in typing.get_args(tp)
    return False


def _optional_of(tp: Any) -> Any:
    """Wrap an annotation so that it admits ``None``; textual annotations stay textual."""
    if isinstance(tp, str):
        return f"Optional[{tp.strip()}]"
    return Optional[tp]


def _derive_options(derive: str | Iterable[str]) -> dict[str, bool]:
    names = [derive] if isinstance(derive, str) else list(derive)
    unknown = [name for name in names if name not in _DERIVE_FLAGS]
    if unknown:
        raise ValueError(
            f"unknown derive option(s) {', '.join(map(repr, unknown))}; "
            f"expected any of {', '.join(sorted(_DERIVE_FLAGS))}"
        )
    options = {flag: False for flag in _DERIVE_FLAGS.values()}
    options.update({_DERIVE_FLAGS[name]: True for name in names})
    return options


def _nested_qualname(target: type, name: str) -> str:
    prefix = target.__qualname__.rpartition(".")[0]
    return f"{prefix}.{name}" if prefix else name


def _build_error_class(
    target: type, partial_name: str, required: list[str]
) -> tuple[type[PartialError], dict[str, type[PartialError]]]:
    error_name = f"{partial_name}Error"
    error_qualname = _nested_qualname(target, error_name)
    error_cls = type(
        error_name,
        (PartialError,),
        {"__module__": target.__module__, "__qualname__": error_qualname},
    )
    variants: dict[str, type[PartialError]] = {}
    by_field: dict[str, type[PartialError]] = {}
    for field_name in required:
        variant = missing_variant_name(field_name)
        if variant in variants:
            raise TypeError(
                f"fields `{variants[variant].field}` and `{field_name}` "
                f"both map to error variant {variant}"
            )
        variant_cls = type(
            variant,
            (error_cls,),
            {
                "field": field_name,
                "variant": variant,
                "__module__": target.__module__,
                "__qualname__": f"{error_qualname}.{variant}",
            },
        )
        setattr(error_cls, variant, variant_cls)
        variants[variant] = variant_cls
        by_field[field_name] = variant_cls
    error_cls.variants = types.MappingProxyType(variants)
    return error_cls, by_field


def _build(target: Any, options: dict[str, bool]) -> type:
    if not isinstance(target, type):
        raise TypeError("partial() can only be applied to classes")
    if not dataclasses.is_dataclass(target):
        raise TypeError(f"{target.__name__} must be a dataclass with named fields")

    partial_name = f"{target.__name__}Partial"
    partial_fields = []
    required: list[str] = []
    for f in dataclasses.fields(target):
        if not f.init:
            continue
        tp = f.type
        if is_optional_type(tp):
            annotation = tp
        else:
            annotation = _optional_of(tp)
            required.append(f.name)
        partial_fields.append((f.name, annotation, dataclasses.field(default=None)))

    error_cls, by_field = _build_error_class(target, partial_name, required)
    partial_cls = dataclasses.make_dataclass(
        partial_name,
        partial_fields,
        bases=(PartialBase,),
        namespace={
            "__complete__": target,
            "_required": types.MappingProxyType(by_field),
            "Error": error_cls,
        },
        **options,
    )
    partial_cls.__module__ = target.__module__
    partial_cls.__qualname__ = _nested_qualname(target, partial_name)

    target.Partial = partial_cls
    target.PartialError = error_cls
    return target


def partial(cls: type | None = None, *, derive: str | Iterable[str] = ()) -> Any:
    """Class decorator generating ``cls.Partial`` and ``cls.PartialError``.

    ``derive`` selects dataclass features of the partial type: any of
    ``repr``, ``eq``, ``order``, ``frozen`` and ``hash``. None are derived by default.
    """
    options = _derive_options(derive)

    def wrap(target: type) -> type:
        return _build(target, options)

    return wrap if cls is None else wrap(cls)


def try_from_partial(cls: type, value: PartialBase) -> Any:
    """Build an instance of ``cls`` from its partial, raising on the first missing field."""
    partial_cls = getattr(cls, "Partial", None)
    if partial_cls is None or getattr(partial_cls, "__complete__", None) is not cls:
        raise TypeError(f"{getattr(cls, '__name__', cls)!r} was not decorated with partial()")
    if not isinstance(value, partial_cls):
        raise TypeError(
            f"expected {partial_cls.__name__}, got {type(value).__name__}"
        )
    values = {}
    for f in dataclasses.fields(partial_cls):
        current = getattr(value, f.name)
        missing_error = partial_cls._required.get(f.name)
        if current is None and missing_error is not None:
            raise missing_error()
        values[f.name] = current
    return cls(**values)