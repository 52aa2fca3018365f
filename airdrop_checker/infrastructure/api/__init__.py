"""HTTP adapters for external APIs."""
