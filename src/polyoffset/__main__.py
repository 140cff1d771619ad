"""Command-line entry: ``python -m polyoffset``."""
from polyoffset.main import main

if __name__ == "__main__":
    main()
