from .keyed_memory import InMemoryKeyedRepo, InMemoryQuantityRepo

__all__ = ["InMemoryKeyedRepo", "InMemoryQuantityRepo"]
