"""Domain layer: piston control records and the exception hierarchy."""
