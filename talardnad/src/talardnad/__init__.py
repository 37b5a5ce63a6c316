"""
Talardnad - marketplace API for providers, markets, users and payments.
"""

__version__ = "0.1.0"
