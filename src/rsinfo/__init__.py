"""rsinfo - Rust environment, toolchain, and project report."""

__version__ = "0.1.0"
