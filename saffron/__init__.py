"""Request, response, collection, environment and history models for an HTTP client, with storage, output and import helpers."""

__version__ = "0.1.5"