"""Shared services: money formatting and toast notifications."""
