"""Infrastructure layer: database wiring, ORM models and repositories."""
