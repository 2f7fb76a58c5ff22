"""Repository interfaces and implementations.

This package defines the abstract keyed repository interfaces and concrete
implementations, such as the in-memory adapters under
:mod:`recordkeeper.repositories.memory`.
"""
