"""Module for common code."""
import logging

LOG = logging.getLogger("freesound")
