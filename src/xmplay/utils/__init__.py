"""Utility modules for xmplay."""
