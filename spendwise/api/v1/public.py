"""GET /v1/public/{token} - read-only views shared by link"""

import logging
from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from spendwise.api.v1.schemas import SummaryResponse, WeekDetailsResponse
from spendwise.api.v1.summary import compute_summary, compute_week_details
from spendwise.api.dependencies import get_request_id, get_today
from spendwise.domain.exceptions import PublicLinkNotFoundError
from spendwise.infrastructure.database.models import WorkspaceRecord
from spendwise.infrastructure.database.repositories import WorkspaceRepository
from spendwise.infrastructure.database.session import get_db

router = APIRouter()


def load_public_workspace(db: Session, token: str) -> WorkspaceRecord:
    """
    Raises:
        PublicLinkNotFoundError: Token unknown or revoked
    """
    workspace = WorkspaceRepository(db).get_by_public_token(token)
    if workspace is None:
        raise PublicLinkNotFoundError("Public link not found")
    return workspace


def get_public_workspace(token: str, request: Request, db: Session = Depends(get_db)) -> WorkspaceRecord:
    try:
        return load_public_workspace(db, token)
    except PublicLinkNotFoundError as e:
        logging.warning(f"{e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=404, detail="Not found")


@router.get("/public/{token}", response_model=SummaryResponse)
def get_public_summary(
    request: Request,
    week_start: Optional[date] = Query(None),
    workspace: WorkspaceRecord = Depends(get_public_workspace),
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    return compute_summary(db, workspace, today, week_start, get_request_id(request))


@router.get("/public/{token}/details", response_model=WeekDetailsResponse)
def get_public_details(
    start: Optional[date] = Query(None),
    workspace: WorkspaceRecord = Depends(get_public_workspace),
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    return compute_week_details(db, workspace, today, start)
