"""Evidence API: accept and list evidence testimonies."""

__version__ = "0.1.0"
