"""
Core utilities for the NZFCC package.
"""

from __future__ import annotations

import hashlib


def snapshot_signature(text: str) -> str:
    """Generate a signature for a taxonomy snapshot.

    Embedded in generated modules so a generated file can be traced back to
    the exact snapshot it was built from.

    Args:
        text: Raw snapshot content

    Returns:
        SHA-256 hex digest of the snapshot text
    """
    return hashlib.sha256(text.encode("utf-8")).hexdigest()
