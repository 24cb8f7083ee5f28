"""Adapters connecting the core engine to the outside world."""
