"""Shared helpers: settings-block parsing, HTTP envelopes, time."""
