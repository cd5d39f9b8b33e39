"""
Core domain models, bid evaluation and calendar rules.

This module contains the foundational building blocks that are independent
of external systems (repositories, clocks, mail delivery, etc.).
"""
