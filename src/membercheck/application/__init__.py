"""Application layer: assertion evaluation, message formatting, reporting."""
