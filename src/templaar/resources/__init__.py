"""Packaged resources for templaar."""
