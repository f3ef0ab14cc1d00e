"""Allow ``python -m scalar_astar``; delegates to the CLI."""

from scalar_astar.cli.main import main

if __name__ == "__main__":  # pragma: no cover
    main()
