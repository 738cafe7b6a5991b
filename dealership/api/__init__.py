# File: dealership/api/__init__.py
"""
API package for the dealership sales service.

This package contains the HTTP layer: endpoints, dependencies and routing.
"""
