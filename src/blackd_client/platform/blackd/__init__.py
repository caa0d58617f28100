"""blackd infrastructure package.

Minimal client utilities to talk to a locally running ``blackd`` over HTTP.
"""

from .http_client import BlackdHTTPClient, HTTPDaemonResponse

__all__ = ["BlackdHTTPClient", "HTTPDaemonResponse"]
