"""Shared utilities: reference data, logging, timezone helpers."""
