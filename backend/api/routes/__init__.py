"""Routes owned by the API layer itself."""
