"""Shared helpers used across layers (datetime, ids, network, logging)."""
