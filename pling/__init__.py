"""Pling domain core."""
