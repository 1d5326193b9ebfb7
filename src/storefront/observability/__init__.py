"""Observability: structured logging."""

from storefront.observability.logging import StructuredLogFormatter, configure_logging

__all__ = ["StructuredLogFormatter", "configure_logging"]
