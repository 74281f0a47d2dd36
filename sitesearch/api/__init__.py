"""HTTP API for the full search view."""
