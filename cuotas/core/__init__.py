"""Core utilities for the dues service."""
