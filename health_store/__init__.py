"""
Local health data store: authorization state, daily range queries and sample writes.
"""

from .store import HealthStore

__all__ = ["HealthStore"]
