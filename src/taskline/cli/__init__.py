"""Command registry and process entrypoint."""
