"""Core configuration for listings."""

from .config import Config

__all__ = ["Config"]
