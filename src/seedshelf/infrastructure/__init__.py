"""Infrastructure layer: store adapters, observability and lifecycle."""
