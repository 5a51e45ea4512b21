"""Domain layer: entities and errors shared by the store and renderer."""
