"""Connector namespace for provider-specific bindings.

Architecture:
    Connectors are organized by provider: ``connectors/<provider>/``
    holds ``config.py`` (URLs, versions, media types), authentication
    filters, the ``endpoints`` registry (specs plus response adapters),
    the async client in ``provider.py`` and its blocking twin in
    ``client.py``.
"""

__all__: list[str] = []
