"""Turn an MSX BSAVE binary into a PC-88 loadable binary."""

from __future__ import annotations

import os
import sys
from pathlib import Path


def convert(source: str | os.PathLike, target: str | os.PathLike) -> int:
    """Copy ``source`` to ``target``, dropping the id byte and execution address.

    Returns the number of bytes written.
    """
    data = Path(source).read_bytes()
    converted = data[1:5] + data[7:]
    Path(target).write_bytes(converted)
    return len(converted)


def main(argv: list[str] | None = None) -> int:
    """Command entry: ``binconv SOURCE TARGET``."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 2:
        return 1
    try:
        convert(args[0], args[1])
    except OSError as error:
        print(f"Can't open file {error.filename}.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())