"""
Core domain primitives and contracts.

This module contains the foundational building blocks of the converter:
the numeral table, numeral errors, pure conversions and JSON contracts.
"""
