"""Module entrypoint for ``python -m dirgrep``.

Argument parsing and the pipeline run happen in ``dirgrep.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
