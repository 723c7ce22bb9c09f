"""Presentation layer: fluent API and pytest plugin."""
