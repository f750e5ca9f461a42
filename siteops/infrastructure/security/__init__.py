"""Security helpers: JWT access tokens."""
