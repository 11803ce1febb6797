"""Module entrypoint for ``python -m lazylist``.

All argument parsing and runtime setup happen in ``lazylist.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
