"""Sorting visualiser: a pygame menu of bubble, selection, insertion and quick sort."""

__version__ = "0.1.0"