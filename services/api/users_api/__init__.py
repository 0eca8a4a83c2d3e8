"""Users API service."""
