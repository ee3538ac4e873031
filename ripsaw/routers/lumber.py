from fastapi import APIRouter, HTTPException
from typing import List

from .. import schemas
from ..config import settings
from ..sizing import Lumber, LumberError
from ..sizing.conversion import conversion_chart

router = APIRouter(prefix="/lumber", tags=["lumber"])


def lumber_from_schema(board: schemas.BoardBase) -> Lumber:
    if board.is_nominal:
        return Lumber.create_nominal(board.width_inches, board.height_inches, board.length_feet)
    return Lumber.create_actual(board.width_inches, board.height_inches, board.length_feet)


def parse_spec(spec: str, nominal: bool = None) -> Lumber:
    """Parse a spec, falling back to RIPSAW_DEFAULT_NOMINAL for the mode. 422 on bad input."""
    if nominal is None:
        nominal = settings.DEFAULT_NOMINAL
    try:
        return Lumber.create_from_spec(spec, nominal=nominal)
    except LumberError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/sizes", response_model=List[schemas.SizeChartRow])
def list_sizes():
    """Nominal -> actual chart for dimensional lumber."""
    return [
        {"nominal_inches": nominal, "actual_inches": actual}
        for nominal, actual in sorted(conversion_chart().items())
    ]


@router.post("/parse", response_model=schemas.Board)
def parse(request: schemas.SpecRequest):
    return parse_spec(request.spec, request.nominal).to_dict()


@router.post("/actual", response_model=schemas.Board)
def to_actual(board: schemas.BoardBase):
    try:
        return lumber_from_schema(board).as_actual_size().to_dict()
    except LumberError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/nominal", response_model=schemas.Board)
def to_nominal(board: schemas.BoardBase):
    try:
        return lumber_from_schema(board).as_nearest_nominal().to_dict()
    except LumberError as e:
        raise HTTPException(status_code=422, detail=str(e))
