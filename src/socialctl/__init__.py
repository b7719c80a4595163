"""socialctl — social graph service: users, connections, degrees of separation."""

__version__ = "0.1.0"
