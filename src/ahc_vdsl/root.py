"""Frame collection keyed by mode, plus the output sink."""

from __future__ import annotations

from enum import Enum
import logging
from pathlib import Path
import sys
from typing import Iterable, Optional, Union, TYPE_CHECKING

from ahc_vdsl.frame import VisFrame

if TYPE_CHECKING:
    from ahc_vdsl.config import VisConfig

logger = logging.getLogger(__name__)


class OutputDestination(Enum):
    STDERR = "stderr"
    FILE = "file"


class VisRoot:
    """Owns every frame of a run and writes them out in one pass."""

    def __init__(self, output_path: Union[str, Path, None] = None) -> None:
        self._frames_by_mode: dict[str, list[VisFrame]] = {}
        self.output_path: Optional[Path] = (
            Path(output_path) if output_path is not None else None
        )

    @classmethod
    def with_file(cls, path: Union[str, Path]) -> "VisRoot":
        return cls(path)

    @classmethod
    def from_config(cls, cfg: "VisConfig") -> "VisRoot":
        return cls(cfg.output_path)

    @property
    def output_destination(self) -> OutputDestination:
        if self.output_path is None:
            return OutputDestination.STDERR
        return OutputDestination.FILE

    def add_frame(self, mode: str, frame: VisFrame) -> "VisRoot":
        self._frames_by_mode.setdefault(mode, []).append(frame)
        return self

    def add_frames(self, mode: str, frames: Iterable[VisFrame]) -> "VisRoot":
        self._frames_by_mode.setdefault(mode, []).extend(frames)
        return self

    def get_frames(self, mode: str) -> Optional[list[VisFrame]]:
        """Return the frames recorded for ``mode``, or None if unknown."""
        return self._frames_by_mode.get(mode)

    def modes(self) -> list[str]:
        return list(self._frames_by_mode)

    def render_all(self) -> str:
        """Serialize every frame, modes and frames in insertion order."""
        return "".join(
            frame.to_vis_string(mode)
            for mode, frames in self._frames_by_mode.items()
            for frame in frames
        )

    def output_all(self) -> bool:
        """Write all frames to the configured sink in a single write.

        A file that cannot be written is logged, not raised; the return
        value tells whether the write went through.
        """
        output = self.render_all()
        if self.output_path is None:
            sys.stderr.write(output)
            sys.stderr.flush()
            return True
        try:
            self.output_path.write_text(output, encoding="utf-8")
        except OSError:
            logger.exception("Failed to write visualization to %s", self.output_path)
            return False
        logger.debug(
            "Wrote %d bytes of visualization to %s", len(output), self.output_path
        )
        return True
