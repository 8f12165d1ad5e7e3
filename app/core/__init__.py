"""Core application configuration and logging."""
