from .in_memory import InMemoryAppStore
from .mongodb import MongoAppStore
from .seed import load_seed_records

__all__ = ["InMemoryAppStore", "MongoAppStore", "load_seed_records"]
