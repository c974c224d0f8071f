"""cssruleset tests."""
