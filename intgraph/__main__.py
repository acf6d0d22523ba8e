"""Allow ``python -m intgraph``."""

from intgraph.cli import main

if __name__ == "__main__":
    main()
