"""Example integrations for square_ox (not installed with the package)."""
