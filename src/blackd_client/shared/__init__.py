# Where: blackd_client.shared.__init__
# What: Provide a concise import surface for cross-cutting error types.
# Why: Let platform adapters and feature use cases raise the same exceptions.

"""Shared cross-cutting utilities exposed at the package level."""

from .errors import FatalRunError, ProtocolViolationError, TransportError, TraversalError

__all__ = ["FatalRunError", "ProtocolViolationError", "TransportError", "TraversalError"]
