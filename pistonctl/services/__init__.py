"""Service wiring for the piston controller."""
