"""Nad Balance Service Application Package.

This package contains the core application components:
- core: error hierarchy
- models: response models and token kinds
- routers: the token dispatcher, dependencies and error handlers
- services: the Insight client and paginated fetcher
- utils: logging setup and NFT ownership matching
"""

__version__ = "0.1.0"
