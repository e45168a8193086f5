"""Codecs for Freesound resources."""
