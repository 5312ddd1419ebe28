"""Shared helpers: random sources and table selection."""
