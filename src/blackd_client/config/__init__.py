"""Configuration loading and runtime settings."""

from blackd_client.config.config import Config

__all__ = ["Config"]
