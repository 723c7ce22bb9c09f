"""Infrastructure layer: runtime introspection adapters."""
