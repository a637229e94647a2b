"""Packaged data files (custom readings table)."""
