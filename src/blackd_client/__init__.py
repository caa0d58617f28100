"""blackd-client - format Python sources through a running blackd daemon."""

__version__ = "0.1.0"
