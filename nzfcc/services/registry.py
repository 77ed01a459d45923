from __future__ import annotations

from nzfcc.core.config import load_settings
from nzfcc.core.logging import LogContext, get_logger
from nzfcc.repositories.snapshot_repo import SnapshotRepository
from nzfcc.services.loader import load_snapshot
from nzfcc.services.synthesizer import Taxonomy, synthesize

logger = get_logger("nzfcc.services.registry")

# Built on first access, frozen for the rest of the process
_taxonomy: Taxonomy | None = None


def build_taxonomy(repo: SnapshotRepository) -> Taxonomy:
    with LogContext(logger, "build taxonomy", snapshot=str(repo.snapshot_path)):
        snapshot = load_snapshot(repo.read_snapshot())
        return synthesize(snapshot, module="nzfcc")


def get_taxonomy() -> Taxonomy:
    global _taxonomy
    if _taxonomy is None:
        settings = load_settings()
        _taxonomy = build_taxonomy(SnapshotRepository(settings.snapshot_path))
    return _taxonomy


def reset_taxonomy() -> None:
    global _taxonomy
    _taxonomy = None
