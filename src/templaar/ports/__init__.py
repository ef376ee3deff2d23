"""Ports (abstract collaborators) consumed by the application layer."""
