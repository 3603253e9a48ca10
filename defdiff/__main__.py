"""Allow running defdiff as a module: python -m defdiff."""

from defdiff.cli import main

if __name__ == "__main__":
    main()
