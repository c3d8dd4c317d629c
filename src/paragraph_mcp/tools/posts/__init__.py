"""Post tools: create, fetch, list, feed and tag listings."""
