"""Core retrieval engine: domain models, ports and services."""
