"""Utility functions for emplace."""
