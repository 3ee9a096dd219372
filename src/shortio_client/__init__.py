"""Short.io API client.

Async client for the Short.io link shortening service: links, domains,
country and region rules, and click statistics.
"""

__version__ = "0.1.0"
