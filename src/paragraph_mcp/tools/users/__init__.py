"""User tools: lookup by id or wallet address."""
