# File: dealership/db/__init__.py
"""
Database package: table mappings and session management.
"""
