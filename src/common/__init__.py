"""Shared building blocks: record schema, logging, errors and repositories."""
