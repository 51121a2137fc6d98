"""Module entrypoint for ``python -m dirlist``.

Behaves exactly like the ``dirlist`` console script.
"""

from .cli import run


if __name__ == "__main__":
    run()
