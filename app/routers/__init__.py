"""API route handlers.

This module contains:
- Shared dependencies (settings, Insight client, API key check)
- The token balance dispatcher
- Global error handlers
"""
