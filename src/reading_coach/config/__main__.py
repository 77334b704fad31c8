"""CLI entry point for configuration introspection.

Usage:
    python -m reading_coach.config
    python -m reading_coach.config --check
    python -m reading_coach.config --json
"""

from .introspection import main

if __name__ == "__main__":
    main()
