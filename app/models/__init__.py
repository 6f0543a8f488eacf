"""Pydantic models and plain data types.

This module contains data models used for:
- API response serialization
- The token kinds served by the proxy
- The aggregate produced by the paginated fetcher
"""
