"""Style Map Backend - champion style map API.

This package exposes the ``stylemap`` engine over HTTP using a hexagonal
layout.

Layers:
- application: Use cases and port interfaces
- infrastructure: Adapters for external data sources
- api: REST endpoints and response transformers
"""

__version__ = "1.0.0"
