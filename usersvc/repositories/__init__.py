"""
Persistence adapters.

Services depend on these wrappers rather than calling the pymongo collection
directly, which keeps the storage calls in one place.
"""
