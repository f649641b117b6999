"""Printable lighting paperwork from show files."""
