"""CSS parsing and expansion tests."""
