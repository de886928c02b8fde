"""Adapters for talking to the Order service."""

from .base import OrderClient

__all__ = ["OrderClient"]
