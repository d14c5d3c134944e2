"""Discovery of R and Python installations, version handling, Connect checks and option validation."""

__version__ = "0.1.0"