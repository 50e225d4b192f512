"""Outer interfaces exposing the application."""
