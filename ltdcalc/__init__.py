"""ltd-calc - Limited company take-home, pension and tax efficiency calculator."""

__version__ = "0.1.0"
