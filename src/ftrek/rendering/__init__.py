"""Rendering of traversal entries as a box-drawing tree."""
