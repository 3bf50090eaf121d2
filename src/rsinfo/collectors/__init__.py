"""Report collectors."""
