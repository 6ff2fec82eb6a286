"""Infrastructure layer - database lifecycle and logging."""
