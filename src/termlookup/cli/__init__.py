"""Command-line interface for termlookup."""
