"""ltd-calc command-line interface."""
