"""Shared helpers (input discovery, output naming)."""
