"""Lunch restaurant picker."""

__version__ = "0.1.0"
