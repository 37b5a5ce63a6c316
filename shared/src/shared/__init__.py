"""
Shared utilities for Talardnad components.
"""
