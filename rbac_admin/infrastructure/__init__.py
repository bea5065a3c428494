"""Infrastructure layer: persistence and access resolution."""
