"""Persistence layer for garment metadata."""
