"""Module entrypoint for ``python -m lazycommits``.

Argument parsing and repository loading live in ``lazycommits.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
