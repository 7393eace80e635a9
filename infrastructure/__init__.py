"""Infrastructure adapters shared by the controller (logging)."""
