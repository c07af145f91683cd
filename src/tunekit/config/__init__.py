"""Configuration package for tunekit clients."""
