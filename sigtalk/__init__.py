"""Bit-by-bit text messaging between processes over SIGUSR1 and SIGUSR2, with small string and formatting helpers."""

__version__ = "0.1.0"
__all__ = ["ctype", "printf", "strings", "protocol", "server", "client"]