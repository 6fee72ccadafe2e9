"""Furniture placement fit-checking engine."""
