"""
detmath — deterministic integer math primitives behind a word-based call ABI.

Fixed-point arithmetic, lookup-table trigonometry, 2-D geometry, number theory,
elliptic-curve point arithmetic, a xorshift* stream and projectile coefficients.
Every operation is total and bit-reproducible; no floating point is used.
"""

__version__ = "0.1.0"
