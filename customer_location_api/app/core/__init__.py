"""Core infrastructure: configuration, logging and shared dependencies."""
