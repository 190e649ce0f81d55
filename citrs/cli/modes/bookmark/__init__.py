"""Bookmark mode."""

DESCRIPTION = "Bookmark mode"
