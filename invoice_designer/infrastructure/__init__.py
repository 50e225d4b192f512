"""Persistence and other infrastructure adapters."""
