"""Infrastructure layer: the LMDB environment adapter."""

from lmdbctl.infrastructure.store import DEFAULT_MAP_SIZE, Store, estimate_map_size

__all__ = ["DEFAULT_MAP_SIZE", "Store", "estimate_map_size"]
