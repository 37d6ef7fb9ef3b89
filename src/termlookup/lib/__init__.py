"""Shared utilities: errors, encoding, logging and report rendering."""
