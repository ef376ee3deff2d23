"""Concrete adapters for templaar ports."""
