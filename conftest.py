"""Keeps the repository root importable so tests can reach the demo ``app``."""
