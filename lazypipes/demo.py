"""Command that prints a short showcase of the adapters."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from lazypipes.adapters import Drop, Filter, Keys, Reverse, Take, Transform, Values


def render_demo() -> str:
    """Return the showcase text, one labelled line per pipeline."""
    numbers = [1, 2, 3, 4, 5, 6]
    names = {1: "one", 2: "two", 3: "three"}
    sections = [
        (
            "Filter + Transform",
            numbers | Filter(lambda x: x % 2) | Transform(lambda x: x * x),
        ),
        ("Take 4", numbers | Take(4)),
        ("Drop 2", numbers | Drop(2)),
        ("Reverse", numbers | Reverse()),
        ("Reverse + Take 3", numbers | Reverse() | Take(3)),
        ("Keys", names | Keys()),
        ("Values", names | Values()),
    ]
    return "".join(
        f"{label}: " + "".join(f"{item} " for item in view) + "\n"
        for label, view in sections
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Print the showcase and return the exit status."""
    argparse.ArgumentParser(
        description="Show the lazy adapters on a few small inputs."
    ).parse_args(argv)
    print(render_demo(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())