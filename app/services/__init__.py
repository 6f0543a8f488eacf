"""Business logic services.

This module contains:
- The thirdweb Insight HTTP client
- Paginated aggregation with ownership detection
"""
