"""Calgrid personal calendar package."""
