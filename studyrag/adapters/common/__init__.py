"""Shared adapter utilities."""
