"""Book catalog service.

HTTP API over a single book resource: listing, filtered pagination,
duplicate-checked creation and claim-gated deletion.
"""

__version__ = "0.1.0"
