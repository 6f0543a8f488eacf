"""Core building blocks shared across routers and services."""
