"""Scripted frame edits.

An edit script is a JSON document listing frame edits to replay against a
stretchy path, in order:

    {"edits": [
        {"op": "insert_midpoint", "side": 0, "point": [50, -20]},
        {"op": "move_corner", "index": 2, "point": [400, 80]},
        {"op": "move_by", "delta": [10, 0]}
    ]}
"""

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, Field, ValidationError

from glyphwarp.core.stretchy import StretchyPath
from glyphwarp.domain import CORNER_COUNT, Point
from glyphwarp.exceptions import EditScriptError


class MoveCorner(BaseModel):
    """Move one of the four frame corners."""

    op: Literal["move_corner"] = "move_corner"
    index: int = Field(ge=0, lt=CORNER_COUNT, description="Corner index, clockwise from top-left")
    point: tuple[float, float]


class MoveVertex(BaseModel):
    """Move a frame vertex by its index in the frame path."""

    op: Literal["move_vertex"] = "move_vertex"
    index: int = Field(ge=0, description="Vertex index in the frame path")
    point: tuple[float, float]


class InsertMidpoint(BaseModel):
    """Insert a vertex on the top (0) or bottom (2) side."""

    op: Literal["insert_midpoint"] = "insert_midpoint"
    side: int = Field(ge=0, lt=CORNER_COUNT, description="Side index")
    point: tuple[float, float]


class MoveBy(BaseModel):
    """Translate the whole frame."""

    op: Literal["move_by"] = "move_by"
    delta: tuple[float, float]


Edit = Annotated[
    MoveCorner | MoveVertex | InsertMidpoint | MoveBy,
    Field(discriminator="op"),
]


class EditScript(BaseModel):
    """An ordered list of frame edits."""

    edits: list[Edit] = Field(default_factory=list)


def load_edit_script(path: Path) -> EditScript:
    """Read and validate an edit script.

    Args:
        path: JSON file to read

    Returns:
        Validated edit script

    Raises:
        EditScriptError: If the file cannot be read or is not a valid script
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise EditScriptError(f"cannot read '{path}': {e}") from e

    try:
        return EditScript.model_validate_json(text)
    except ValidationError as e:
        raise EditScriptError(f"'{path}': {e.error_count()} validation error(s)\n{e}") from e


def parse_point_arg(arg: str) -> tuple[int, Point]:
    """Parse an ``INDEX:X,Y`` command line edit.

    Args:
        arg: Text such as ``"2:20,10"``

    Returns:
        (index, point)

    Raises:
        EditScriptError: If the text is malformed
    """
    try:
        index_text, coords = arg.split(":", 1)
        x_text, y_text = coords.split(",")
        return int(index_text), Point(float(x_text), float(y_text))
    except ValueError as e:
        raise EditScriptError(f"expected INDEX:X,Y, got '{arg}'") from e


def apply_edit(stretchy: StretchyPath, edit: Edit) -> bool:
    """Apply one scripted edit.

    Args:
        stretchy: Stretchy path to edit
        edit: Edit to apply

    Returns:
        True if the resulting arrangement pass succeeded

    Raises:
        InvalidFrameError: If the stretchy path refuses the edit
    """
    if isinstance(edit, MoveCorner):
        return stretchy.on_corner_moved(edit.index, Point(*edit.point))
    if isinstance(edit, MoveVertex):
        return stretchy.on_vertex_moved(edit.index, Point(*edit.point))
    if isinstance(edit, InsertMidpoint):
        stretchy.on_midpoint_inserted(edit.side, Point(*edit.point))
        return stretchy.last_error is None
    return stretchy.move_by(Point(*edit.delta))
