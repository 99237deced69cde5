"""Recorded pointer samples.

A sample file is a JSON list of pointer events in the normalized 0-100 space:

    [{"kind": "down", "x": 50, "y": 25}, {"kind": "move", "x": 50, "y": 27.5},
     {"kind": "up"}]
"""

import json
from collections.abc import Iterable
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, TypeAdapter, ValidationError, model_validator

from glyphtrace.domain import Point
from glyphtrace.exceptions import SampleFileError


class SampleKind(str, Enum):
    """Pointer event kind."""

    DOWN = "down"
    MOVE = "move"
    UP = "up"


class PointerSample(BaseModel):
    """One pointer event."""

    kind: SampleKind
    x: float | None = Field(default=None, allow_inf_nan=False)
    y: float | None = Field(default=None, allow_inf_nan=False)

    @model_validator(mode="after")
    def _require_position(self) -> "PointerSample":
        if self.kind is not SampleKind.UP and (self.x is None or self.y is None):
            raise ValueError(f"'{self.kind.value}' sample needs x and y")
        return self

    @property
    def point(self) -> Point | None:
        """Sample position, or None for pointer-up events."""
        if self.x is None or self.y is None:
            return None
        return Point(self.x, self.y)

    @classmethod
    def down(cls, point: Point) -> "PointerSample":
        return cls(kind=SampleKind.DOWN, x=point.x, y=point.y)

    @classmethod
    def move(cls, point: Point) -> "PointerSample":
        return cls(kind=SampleKind.MOVE, x=point.x, y=point.y)

    @classmethod
    def up(cls) -> "PointerSample":
        return cls(kind=SampleKind.UP)


_SAMPLE_LIST = TypeAdapter(list[PointerSample])


def load_samples(path: Path) -> list[PointerSample]:
    """Read pointer samples from a JSON file.

    Args:
        path: Path to the sample file

    Returns:
        Samples in recorded order

    Raises:
        SampleFileError: If the file is missing, unreadable or malformed
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise SampleFileError(str(path), "file not found") from e
    except (OSError, UnicodeDecodeError) as e:
        raise SampleFileError(str(path), str(e)) from e

    try:
        return _SAMPLE_LIST.validate_json(text)
    except ValidationError as e:
        first = e.errors()[0]
        where = ".".join(str(loc) for loc in first["loc"])
        raise SampleFileError(str(path), f"{where}: {first['msg']}" if where else first["msg"]) from e


def save_samples(path: Path, samples: Iterable[PointerSample]) -> None:
    """Write pointer samples to a JSON file.

    Args:
        path: Destination path
        samples: Samples in order
    """
    data = [s.model_dump(mode="json", exclude_none=True) for s in samples]
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
