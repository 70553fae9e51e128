"""Infrastructure layer: SQL generation and database access."""
