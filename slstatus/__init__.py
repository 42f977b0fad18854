"""A status monitor that formats system information into a single line."""

__version__ = "0.1.0"