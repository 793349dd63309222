"""Shared utilities: logging setup and datetime helpers. No business logic."""
