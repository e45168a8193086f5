"""Freesound core: models, parsers and codecs."""
