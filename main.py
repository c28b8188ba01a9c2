"""Main entry point for assembling ndoc documentation trees."""

from ndoc_tree.ndoc_to_outline import main

if __name__ == "__main__":
    raise SystemExit(main())
