"""
Core domain models, digit-wise arithmetic primitives, and payload contracts.

This module contains the foundational building blocks that are independent
of any caller (console, services, etc.).
"""
