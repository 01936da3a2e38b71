"""Top-level gleam commands (one module per command)."""
