"""Infrastructure adapters: settings, database, repositories and logging."""
