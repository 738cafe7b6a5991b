# File: dealership/api/endpoints/__init__.py
