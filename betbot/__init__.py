"""Friendly bets on matches: data store, scoring, persistence, messages, folder watching and configuration."""

__version__ = "2.2"