# -----------------------------------------------------------------------------
# Terminal front end
# Flow: prompt for size and cells -> verbose Gauss-Jordan -> paged transcript.
# -----------------------------------------------------------------------------

from __future__ import annotations
import logging
from typing import Sequence

from .config import LOG_LEVEL
from .prompt import InputFn, OutputFn, sequential_input
from .solver import GaussJordan
from .viewer import LogViewer


def show_log_viewer(lines: Sequence[str], read: InputFn = input, write: OutputFn = print) -> None:
    viewer = LogViewer(lines)
    while True:
        write(viewer.title)
        for line in viewer.visible():
            write(line)
        write(viewer.footer())
        if not viewer.handle(read("[u]p [d]own [l]eft [r]ight [q]uit > ")):
            break


def main(read: InputFn = input, write: OutputFn = print) -> int:
    logging.basicConfig(level=LOG_LEVEL,
                        format="%(levelname)s %(name)s: %(message)s")

    A, rows, cols = sequential_input(read, write)
    result = GaussJordan().solve(A, rows, cols)
    show_log_viewer(result.log.lines(), read, write)
    return 0 if result.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
