"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the core needs,
without specifying HOW it's done.

Subfolders:
- repositories/   → aggregate persistence interfaces
- (root files)    → transaction boundary
"""

from officeops.domain.ports.transaction import TransactionPort

__all__ = [
    "TransactionPort",
]
