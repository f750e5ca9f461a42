"""Domain layer: exceptions independent of infrastructure."""
