"""Checkie — an English draughts rules engine."""

__version__ = "0.1.0"
