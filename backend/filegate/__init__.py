"""FileGate: HTTP gateway for browsing and downloading a local directory tree."""

__version__ = "0.1.0"
