"""Module entrypoint for ``python -m treemarquee``."""

from .cli import main


if __name__ == "__main__":
    main()
