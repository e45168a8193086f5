"""Models for Freesound API resources."""
