"""
Memo API endpoints - Create memos, list them and acknowledge CSV uploads.
"""

import logging
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from ..config import settings
from ..core import (
    CsvReadError,
    MemoForm,
    MemoSelector,
    MemoValidationError,
    acknowledge_import,
    build_memo_list,
    read_csv_upload,
)
from ..models import CsvImportResult, Memo, MemoCreate, MemoCreated, MemoListView
from ..storage import MemoStore, get_memo_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/memos", tags=["memos"])


@router.post("", response_model=MemoCreated, status_code=status.HTTP_201_CREATED)
async def create_memo(
    payload: MemoCreate,
    store: MemoStore = Depends(get_memo_store)
):
    """
    Submit the memo form.

    Args:
        payload: Form values; subject, from and to are required
        store: Session memo store

    Returns:
        MemoCreated: The new memo and a success notification
    """
    form = MemoForm(draft=payload)
    try:
        return form.submit(store)
    except MemoValidationError as e:
        raise HTTPException(
            status_code=422,
            detail=e.notification.model_dump()
        )


@router.get("", response_model=MemoListView)
async def list_memos(store: MemoStore = Depends(get_memo_store)):
    """
    List all memos, newest first.

    Returns:
        MemoListView: Empty state or one entry per memo
    """
    return build_memo_list(store.snapshot())


@router.get("/{memo_id}", response_model=Memo)
async def get_memo(
    memo_id: str,
    store: MemoStore = Depends(get_memo_store)
):
    """Select one memo of the list."""
    selector = MemoSelector(
        store, on_select=lambda memo: logger.debug(f"Memo selected: {memo.id}")
    )
    memo = selector.select(memo_id)
    if memo is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Memo {memo_id} not found"
        )
    return memo


@router.post("/import", response_model=CsvImportResult)
async def import_memos(file: UploadFile = File(...)):
    """
    Acknowledge an uploaded CSV file.

    The file is read and its records are counted; no memo is created.

    Args:
        file: Uploaded CSV file

    Returns:
        CsvImportResult: Headers, record count and notification
    """
    try:
        text = await read_csv_upload(file, settings.csv_import_max_bytes)
    except CsvReadError as e:
        logger.warning(f"CSV import failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.notification.model_dump()
        )
    finally:
        await file.close()

    return acknowledge_import(text, file.filename)
