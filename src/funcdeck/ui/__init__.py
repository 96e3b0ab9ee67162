"""Terminal front end: parameter collection, result display, CLI."""
