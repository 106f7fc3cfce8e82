"""Configuration — CLI settings and structured logging."""
