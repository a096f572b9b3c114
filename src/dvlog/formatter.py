"""Value-list formatter: renders record bodies."""

from typing import Any, Iterable, TextIO


def write_values(buf: TextIO, values: Iterable[Any]) -> None:
    """Write str() of each value to buf, separated by single spaces.

    No quoting, type prefix or truncation is applied, and each value is
    one token regardless of its internal structure: a tuple is written
    as ``str(the_tuple)``, not expanded.
    """
    first = True
    for value in values:
        if not first:
            buf.write(" ")
        buf.write(str(value))
        first = False
