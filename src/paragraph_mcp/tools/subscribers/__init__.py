"""Subscriber tools: add, list and bulk CSV import."""
