"""Publication tools: lookup by slug, domain or API key, and subscriber counts."""
