"""Inline GraphQL fragments and split operations for the relay compiler."""

__version__ = "0.1.0"
