"""Shared utilities: logging and environment configuration."""
