"""lmdbctl — interactive console for LMDB environments."""

__version__ = "0.1.0"
