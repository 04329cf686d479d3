"""Location-based token collection game: procedural, persistent cache grid."""

__version__ = "0.1.0"
