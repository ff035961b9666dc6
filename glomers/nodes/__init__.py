"""Ready-made handlers; each module exposes main() for its console script."""
