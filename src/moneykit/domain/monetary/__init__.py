"""Monetary domain package.

This package contains the Money value type, Currency definitions with the
ISO 4217 registry, and the errors raised by monetary operations.
"""
