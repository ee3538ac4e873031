from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse, Response

from .. import schemas
from ..config import CutSettings, settings
from ..pdf_generator import generate_cut_list_pdf
from ..store import CutListNotFound, CutListStore, get_store
from .lumber import lumber_from_schema, parse_spec

router = APIRouter(prefix="/cut-lists", tags=["cut-lists"])


def _not_found(cut_list_id: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"Cut list {cut_list_id} not found")


@router.post("/", response_model=schemas.CutList)
def create_cut_list(request: schemas.CutListCreate = None, store: CutListStore = Depends(get_store)):
    if request is not None and request.blade_width_inches is not None:
        cut_settings = CutSettings(blade_width_inches=request.blade_width_inches)
    else:
        cut_settings = settings.cut_settings()
    cut_list_id = store.create(cut_settings)
    return {"id": cut_list_id, **store.snapshot(cut_list_id)}


@router.get("/{cut_list_id}", response_model=schemas.CutList)
def get_cut_list(cut_list_id: str, store: CutListStore = Depends(get_store)):
    try:
        return {"id": cut_list_id, **store.snapshot(cut_list_id)}
    except CutListNotFound:
        raise _not_found(cut_list_id)


@router.post("/{cut_list_id}/boards", response_model=schemas.BoardAdded)
def add_board(cut_list_id: str, request: schemas.BoardAdd, store: CutListStore = Depends(get_store)):
    """Add one board by spec ("2x4x8") or by explicit dimensions."""
    if request.spec:
        lumber = parse_spec(request.spec, request.nominal)
    elif request.board is not None:
        lumber = lumber_from_schema(request.board)
    else:
        raise HTTPException(status_code=422, detail="Provide either spec or board")

    try:
        quantity = store.add(cut_list_id, lumber)
        total = store.snapshot(cut_list_id)["total_boards"]
    except CutListNotFound:
        raise _not_found(cut_list_id)
    return {"board": lumber.to_dict(), "quantity": quantity, "total_boards": total}


@router.get("/{cut_list_id}/report", response_class=PlainTextResponse)
def get_report(cut_list_id: str, store: CutListStore = Depends(get_store)):
    try:
        return store.report(cut_list_id)
    except CutListNotFound:
        raise _not_found(cut_list_id)


@router.get("/{cut_list_id}/pdf")
def download_pdf(cut_list_id: str, store: CutListStore = Depends(get_store)):
    try:
        cut_settings, entries = store.entries(cut_list_id)
    except CutListNotFound:
        raise _not_found(cut_list_id)

    pdf_bytes = generate_cut_list_pdf(entries, cut_settings, shop_name=settings.SHOP_NAME)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="CutList-{cut_list_id}.pdf"'},
    )


@router.delete("/{cut_list_id}")
def delete_cut_list(cut_list_id: str, store: CutListStore = Depends(get_store)):
    try:
        store.delete(cut_list_id)
    except CutListNotFound:
        raise _not_found(cut_list_id)
    return {"ok": True}
