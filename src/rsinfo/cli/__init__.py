"""rsinfo command-line interface."""
