"""Aggregate per-frame values from AMBER .lis report files."""
__version__ = "0.1.0"
