"""rangectl — export, hand-edit and re-import poker range analysis configuration."""

__version__ = "0.3.0"
