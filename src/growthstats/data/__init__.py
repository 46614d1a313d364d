"""Embedded reference tables."""
