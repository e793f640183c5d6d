"""Browser-facing layer: pages, view state and the local API client.

This layer talks to Circle only through the ``/api`` routes and MUST NOT
import from ``walletdesk.circle``.
"""
