"""Utility functions and helpers.

This module contains utility functions for:
- Logging setup
- Probing upstream token records for contract addresses
"""
