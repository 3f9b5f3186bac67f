"""
Adapter implementations for the flight database.

Adapters are concrete implementations of the port interfaces:
edge storage, data sources and search algorithms.
"""
