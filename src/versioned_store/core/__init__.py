"""Versioned store core package."""

from .store import VersionedStore

__all__ = ["VersionedStore"]
