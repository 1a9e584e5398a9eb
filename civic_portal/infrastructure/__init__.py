"""Infrastructure layer: in-process adapters used by the application layer."""
