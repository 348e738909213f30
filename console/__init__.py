"""Terminal front end: interactive game and simulation report."""
