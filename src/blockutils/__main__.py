"""Entry point for 'python -m blockutils' command."""

from blockutils.cli import main

if __name__ == "__main__":
    main()
