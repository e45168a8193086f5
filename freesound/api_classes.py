"""Module for API classes and constants."""

API_BASE_URL = "https://freesound.org/apiv2"
WWW_BASE_URL = "https://freesound.org"
