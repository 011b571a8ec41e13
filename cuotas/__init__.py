"""Membership dues tracking API."""
