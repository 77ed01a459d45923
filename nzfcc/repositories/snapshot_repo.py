from pathlib import Path

from nzfcc.core.exceptions import SnapshotNotFoundError, SnapshotParseError


class SnapshotRepository:
    def __init__(self, snapshot_path: Path, generated_path: Path | None = None) -> None:
        self.snapshot_path = Path(snapshot_path)
        self.generated_path = Path(generated_path) if generated_path else None

    def read_snapshot(self) -> str:
        if not self.snapshot_path.exists():
            raise SnapshotNotFoundError(
                f"Snapshot not found: {self.snapshot_path}. "
                "Download it with `wget https://nzfcc.org/downloads/categories.json`.",
                {"path": str(self.snapshot_path)},
            )
        try:
            return self.snapshot_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise SnapshotParseError(
                f"Snapshot {self.snapshot_path} is not valid UTF-8: {e.reason} at byte {e.start}",
                {"path": str(self.snapshot_path), "position": e.start},
            ) from e

    def write_generated(self, source: str) -> Path:
        if self.generated_path is None:
            raise ValueError("No output path configured for generated source.")
        self.generated_path.parent.mkdir(parents=True, exist_ok=True)
        self.generated_path.write_text(source, encoding="utf-8")
        return self.generated_path
