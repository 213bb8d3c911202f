"""Structured record schemas.

This module exposes the decode/encode capability consumed by the
strategy chain and the bundled batch report event schema.
"""
