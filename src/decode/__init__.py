"""Multi-strategy decode pipeline.

This module tries the known producer envelopes in priority order,
checks round-trip integrity, and assembles tool responses.
"""
