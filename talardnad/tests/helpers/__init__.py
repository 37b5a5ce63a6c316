"""Test helpers for Talardnad."""
