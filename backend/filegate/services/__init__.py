"""Business logic services."""

from filegate.services.directory_lister import DirectoryLister

__all__ = ["DirectoryLister"]
