"""Small building blocks: string views, scope guards, lazy values, binary pickles,
brace-style formatting, encodings, LRU caches, scoped handles and more."""

__version__ = "0.1.0"