"""Collaborators around the diagnostics engine: settings, parsers and sinks."""
