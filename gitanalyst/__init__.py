"""Analytics over the history of Git repositories, run through the git executable."""

__version__ = "0.1.0"