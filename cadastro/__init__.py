"""In-memory employee register with addresses, roles and projects, and a product catalogue."""

__version__ = "0.1.0"