"""Command that walks sample containers through every iteration order."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from typing import Any

from orderbag.container import Container

_RULE = "=" * 60


def _banner(title: str) -> None:
    print()
    print(_RULE)
    print(title)
    print(_RULE)


def _show(label: str, items: Iterable[Any]) -> None:
    print(label + " ")
    print("".join(f"{item} " for item in items))


def _show_orders(container: Container[Any], labels: dict[str, str]) -> None:
    _show(labels["ascending"], container.ascending_order())
    _show(labels["descending"], container.descending_order())
    _show(labels["side_cross"], container.side_cross_order())
    _show(labels["reverse"], container.reverse_order())
    _show(labels["order"], container.order())
    _show(labels["middle_out"], container.middle_out_order())


def _labels(suffix: str, middle_out: str) -> dict[str, str]:
    tail = f" ({suffix}):" if suffix else ":"
    return {
        "ascending": "ASCENDING ORDER" + tail,
        "descending": "DESCENDING ORDER" + tail,
        "side_cross": "SIDE CROSS ORDER" + tail,
        "reverse": "REVERSE ORDER" + tail,
        "order": "ORDER" + tail,
        "middle_out": middle_out,
    }


def _int_demo() -> None:
    _banner("INT CONTAINER DEMONSTRATION")
    container: Container[int] = Container([7, 15, 6, 1, 2])
    print(f"Size of container: {len(container)}")
    print(container)
    _show_orders(container, _labels("", "BEGIN MIDDLE ORDER OUT:"))

    container.add(2)
    container.add(2)
    print(f"Size of container: {len(container)}")
    print(container)

    container.remove(2)
    print(f"Size of container: {len(container)}")
    print(container)

    try:
        container.remove(2)
    except ValueError as exc:
        print(f"ERROR: {exc}")


def _string_demo() -> None:
    _banner("STRING CONTAINER DEMONSTRATION")
    container: Container[str] = Container(
        ["apple", "zebra", "banana", "cherry", "date"]
    )
    print(f"Size of string container: {len(container)}")
    print(container)
    _show_orders(container, _labels("strings", "MIDDLE OUT ORDER (strings):"))

    container.add("apple")
    container.add("apple")
    print(f"Size after adding duplicates: {len(container)}")
    print(container)

    container.remove("apple")
    print(f"Size after removing all 'apple': {len(container)}")
    print(container)


def _double_demo() -> None:
    _banner("DOUBLE CONTAINER DEMONSTRATION")
    container: Container[float] = Container([3.14, 2.71, 1.41, 9.81, 6.28])
    print(f"Size of double container: {len(container)}")
    print(container)
    _show_orders(container, _labels("doubles", "MIDDLE OUT ORDER (doubles):"))

    container.add(3.14)
    container.add(3.14)
    print(f"Size after adding duplicates: {len(container)}")
    print(container)

    container.remove(3.14)
    print(f"Size after removing all '3.14': {len(container)}")
    print(container)

    try:
        container.remove(99.99)
    except ValueError as exc:
        print(f"Exception caught: {exc}")


def main(argv: Sequence[str] | None = None) -> int:
    """Print every iteration order for sample int, string and float containers."""
    parser = argparse.ArgumentParser(
        prog="orderbag-demo",
        description="Show the iteration orders of a container.",
    )
    parser.parse_args(argv)
    _int_demo()
    _string_demo()
    _double_demo()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())