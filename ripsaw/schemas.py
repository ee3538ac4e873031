from pydantic import BaseModel, Field
from typing import Optional, List


class SpecRequest(BaseModel):
    spec: str = Field(..., min_length=1, examples=["2x4x8"])
    nominal: Optional[bool] = None


class BoardBase(BaseModel):
    width_inches: float = Field(..., gt=0)
    height_inches: float = Field(..., gt=0)
    length_feet: float = Field(..., gt=0)
    is_nominal: bool = False


class Board(BoardBase):
    identifier: str


class BoardAdd(BaseModel):
    """Either a spec string or explicit dimensions."""
    spec: Optional[str] = None
    nominal: Optional[bool] = None
    board: Optional[BoardBase] = None


class SizeChartRow(BaseModel):
    nominal_inches: float
    actual_inches: float


class CutListCreate(BaseModel):
    blade_width_inches: Optional[float] = Field(default=None, ge=0)


class CutListItem(Board):
    quantity: int


class CutList(BaseModel):
    id: str
    blade_width_inches: float
    items: List[CutListItem] = []
    distinct_boards: int = 0
    total_boards: int = 0


class BoardAdded(BaseModel):
    board: Board
    quantity: int
    total_boards: int
