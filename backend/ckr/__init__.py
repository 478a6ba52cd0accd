"""CKR: estimate how likely a query is to trigger assistant web search."""

__version__ = "0.1.0"
