"""Domain layer: entities, errors and pure services."""
