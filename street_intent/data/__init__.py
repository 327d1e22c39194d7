"""Built-in catalog, vocabulary tables and trigger rules."""
