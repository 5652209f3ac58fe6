"""Configuration, logging setup and the in-memory movie store."""
