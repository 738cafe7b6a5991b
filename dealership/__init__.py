"""Dealership sale transaction service."""
