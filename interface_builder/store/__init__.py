"""Output storage."""

from .output import InterfaceWriter, WriteStatus, resolve_output_path

__all__ = ["InterfaceWriter", "WriteStatus", "resolve_output_path"]
