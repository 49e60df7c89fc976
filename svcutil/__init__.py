"""Shared helpers: configuration, logging, errors, data types, identifiers."""
