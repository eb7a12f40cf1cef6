"""
Core computation engines, domain models, word codec and contracts.

This module contains the deterministic building blocks that are independent
of the hosting runtime (call-data delivery, return mechanism).
"""
