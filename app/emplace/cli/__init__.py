"""CLI package for emplace."""
