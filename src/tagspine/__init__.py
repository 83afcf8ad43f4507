"""tag-spine -- deterministic version fingerprints for cache validation."""

__version__ = "0.1.0"
