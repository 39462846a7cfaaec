"""Configuration, shared constants and logging."""
