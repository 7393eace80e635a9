"""Host-world adapters providing piston handles."""
