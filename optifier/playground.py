"""Small demonstration of partial types: merge two partials and convert."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Optional

from .partial import partial


@partial(derive=("repr",))
@dataclass
class TestType:
    field_i32: int
    field_string: str
    field_option_string: Optional[str]


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration; returns 1 when the merged value is incomplete."""
    parser = argparse.ArgumentParser(
        prog="optifier-playground",
        description="Merge two partial values and try to build the complete one.",
    )
    parser.parse_args(argv)

    TestType(
        field_i32=42,
        field_string="Hello world",
        field_option_string="Hello world",
    )
    first = TestType.Partial(field_i32=None, field_string=None, field_option_string=None)
    second = TestType.Partial(
        field_i32=42,
        field_string=None,
        field_option_string="field_option_string",
    )
    merged = first.merge(second)
    print(f"merged = {merged!r}", file=sys.stderr)

    try:
        config = merged.into_complete()
    except TestType.PartialError as err:
        print(f"Field '{err.field}' is missing", file=sys.stderr)
        return 1

    print(f"config = {config!r}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())