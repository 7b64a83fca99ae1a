"""Purchase logging, editing, trash and restore endpoints"""

import uuid
from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from spendwise.api.v1.schemas import PurchaseRequest, PurchaseResponse, TrashResponse
from spendwise.api.dependencies import get_current_user_id, get_request_id, get_today, get_workspace
from spendwise.domain.cycles import resolve_week
from spendwise.domain.exceptions import PurchaseNotFoundError
from spendwise.infrastructure.database.models import PurchaseRecord, WorkspaceRecord
from spendwise.infrastructure.database.repositories import PurchaseRepository
from spendwise.infrastructure.database.session import get_db
from spendwise.infrastructure.observability.logging import log_purchase_event
from spendwise.infrastructure.observability.metrics import record_purchase_event
from spendwise.utils.formatting import format_currency

router = APIRouter()


def to_purchase_response(record: PurchaseRecord) -> PurchaseResponse:
    return PurchaseResponse(
        purchase_id=str(record.id),
        amount=record.amount,
        amount_formatted=format_currency(record.amount, record.currency),
        currency=record.currency,
        date=record.date,
        description=record.description or "",
        deleted=record.deleted,
    )


def _parse_purchase_id(purchase_id: str) -> uuid.UUID:
    try:
        return uuid.UUID(purchase_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid purchase ID format")


def _load_purchase(repo: PurchaseRepository, purchase_id: str) -> PurchaseRecord:
    try:
        return repo.require_purchase(_parse_purchase_id(purchase_id))
    except PurchaseNotFoundError:
        raise HTTPException(status_code=404, detail="Purchase not found")


@router.post("/purchases", response_model=PurchaseResponse, status_code=201)
def create_purchase(
    request_body: PurchaseRequest,
    request: Request,
    user_id: str = Depends(get_current_user_id),
    workspace: WorkspaceRecord = Depends(get_workspace),
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    """Log a purchase in the workspace currency; the date defaults to today"""
    repo = PurchaseRepository(db, workspace.id)
    record = repo.create_purchase(
        amount=request_body.amount,
        currency=workspace.currency,
        purchase_date=request_body.date or today,
        description=request_body.description,
        created_by_uid=user_id,
    )
    db.commit()

    record_purchase_event("created")
    log_purchase_event(get_request_id(request), str(workspace.id), str(record.id), "created")
    return to_purchase_response(record)


@router.get("/purchases/{purchase_id}", response_model=PurchaseResponse)
def get_purchase(
    purchase_id: str,
    workspace: WorkspaceRecord = Depends(get_workspace),
    db: Session = Depends(get_db),
):
    record = _load_purchase(PurchaseRepository(db, workspace.id), purchase_id)
    return to_purchase_response(record)


@router.put("/purchases/{purchase_id}", response_model=PurchaseResponse)
def update_purchase(
    purchase_id: str,
    request_body: PurchaseRequest,
    request: Request,
    workspace: WorkspaceRecord = Depends(get_workspace),
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    repo = PurchaseRepository(db, workspace.id)
    record = _load_purchase(repo, purchase_id)
    repo.update_purchase(
        record,
        amount=request_body.amount,
        purchase_date=request_body.date or today,
        description=request_body.description,
    )
    db.commit()

    record_purchase_event("updated")
    log_purchase_event(get_request_id(request), str(workspace.id), purchase_id, "updated")
    return to_purchase_response(record)


@router.delete("/purchases/{purchase_id}", response_model=PurchaseResponse)
def delete_purchase(
    purchase_id: str,
    request: Request,
    user_id: str = Depends(get_current_user_id),
    workspace: WorkspaceRecord = Depends(get_workspace),
    db: Session = Depends(get_db),
):
    """Move a purchase to the trash; it stops counting towards budgets"""
    repo = PurchaseRepository(db, workspace.id)
    record = _load_purchase(repo, purchase_id)
    repo.soft_delete(record, user_id)
    db.commit()

    record_purchase_event("deleted")
    log_purchase_event(get_request_id(request), str(workspace.id), purchase_id, "deleted")
    return to_purchase_response(record)


@router.post("/purchases/{purchase_id}/restore", response_model=PurchaseResponse)
def restore_purchase(
    purchase_id: str,
    request: Request,
    user_id: str = Depends(get_current_user_id),
    workspace: WorkspaceRecord = Depends(get_workspace),
    db: Session = Depends(get_db),
):
    repo = PurchaseRepository(db, workspace.id)
    record = _load_purchase(repo, purchase_id)
    repo.restore(record, user_id)
    db.commit()

    record_purchase_event("restored")
    log_purchase_event(get_request_id(request), str(workspace.id), purchase_id, "restored")
    return to_purchase_response(record)


@router.delete("/purchases/{purchase_id}/permanent", status_code=204)
def purge_purchase(
    purchase_id: str,
    request: Request,
    workspace: WorkspaceRecord = Depends(get_workspace),
    db: Session = Depends(get_db),
):
    repo = PurchaseRepository(db, workspace.id)
    record = _load_purchase(repo, purchase_id)
    repo.delete_permanently(record)
    db.commit()

    record_purchase_event("purged")
    log_purchase_event(get_request_id(request), str(workspace.id), purchase_id, "purged")


@router.get("/trash", response_model=TrashResponse)
def get_trash(
    workspace: WorkspaceRecord = Depends(get_workspace),
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    """Soft-deleted purchases of the current week"""
    week = resolve_week(today, workspace.week_start_day_of_week)
    records = PurchaseRepository(db, workspace.id).list_deleted(week.start, week.end)
    return TrashResponse(purchases=[to_purchase_response(r) for r in records])
