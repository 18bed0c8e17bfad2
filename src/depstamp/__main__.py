"""Allow ``python -m depstamp``."""

from .cli import main

if __name__ == "__main__":
    main()
