"""Shared utilities for cli-auth."""
