"""Parsers for Freesound field formats."""
