"""Coin tools: tokenized posts and their holders."""
