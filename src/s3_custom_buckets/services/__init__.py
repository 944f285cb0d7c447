"""Storage backend services."""
