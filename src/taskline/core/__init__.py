"""Interpreter core: parsing, errors, outcomes, session state."""
