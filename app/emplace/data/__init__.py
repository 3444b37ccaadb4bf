"""Bundled data files for emplace."""
