"""ripsaw: lumber sizing and cut lists."""

__version__ = "0.2.0"
