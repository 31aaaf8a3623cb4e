"""Argument-list utilities and generators for split-list, prepend/append and parenthesis-removal macro headers."""

__version__ = "0.1.0"