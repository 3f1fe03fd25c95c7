"""
Core value primitive: Balance, Supply, u64 arithmetic and invariants.

This module contains the foundational building blocks that are independent
of external systems (coin wrappers, object storage, transaction execution).
"""
