"""Performance measurement tools (headless)."""
