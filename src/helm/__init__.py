"""Helm release storage."""

from .storage import ReleaseStorage, decode_release, encode_release

__all__ = ["ReleaseStorage", "decode_release", "encode_release"]
