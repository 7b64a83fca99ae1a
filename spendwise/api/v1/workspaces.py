"""Workspace setup, settings and public link management"""

import logging
import secrets
import string
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from spendwise.api.v1.schemas import (
    PublicLinkResponse,
    SettingsUpdateRequest,
    WorkspaceCreateRequest,
    WorkspaceResponse,
    supported_language,
)
from spendwise.api.dependencies import get_current_user_id, get_request_id, get_workspace
from spendwise.config import settings
from spendwise.domain.exceptions import PermissionDeniedError, WorkspaceExistsError
from spendwise.infrastructure.database.models import WorkspaceRecord
from spendwise.infrastructure.database.repositories import WorkspaceRepository
from spendwise.infrastructure.database.session import get_db

router = APIRouter()


def generate_public_token(length: int) -> str:
    """Lowercase letters only; carries no workspace id"""
    return "".join(secrets.choice(string.ascii_lowercase) for _ in range(length))


def is_workspace_admin(workspace: WorkspaceRecord, user_id: str) -> bool:
    """Owner is admin; legacy workspaces without an owner treat every member as admin"""
    if not workspace.owner_uid:
        return True
    return workspace.owner_uid == user_id


def require_admin(workspace: WorkspaceRecord, user_id: str) -> None:
    if not is_workspace_admin(workspace, user_id):
        raise PermissionDeniedError(f"User {user_id} is not an admin of workspace {workspace.id}")


def to_workspace_response(workspace: WorkspaceRecord, user_id: str) -> WorkspaceResponse:
    return WorkspaceResponse(
        workspace_id=str(workspace.id),
        weekly_budget=workspace.weekly_budget,
        monthly_budget=workspace.monthly_budget,
        budget_start_day=workspace.budget_start_day,
        week_start_day_of_week=workspace.week_start_day_of_week,
        currency=workspace.currency,
        language=workspace.language,
        has_public_link=bool(workspace.public_view_token),
        public_token=workspace.public_view_token,
        is_admin=is_workspace_admin(workspace, user_id),
    )


@router.post("/workspaces", response_model=WorkspaceResponse, status_code=201)
def create_workspace(
    request_body: WorkspaceCreateRequest,
    request: Request,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Set up the caller's workspace.

    Unset budget fields fall back to the service defaults. A user can own
    or belong to one workspace.
    """
    request_id = get_request_id(request)
    repo = WorkspaceRepository(db)

    try:
        if repo.get_by_member(user_id) is not None:
            raise WorkspaceExistsError(f"User {user_id} already has a workspace")

        workspace = repo.create_workspace(
            owner_uid=user_id,
            weekly_budget=request_body.weekly_budget,
            monthly_budget=request_body.monthly_budget or settings.default_monthly_budget,
            currency=request_body.currency,
            language=supported_language(request_body.language) or "en",
            budget_start_day=request_body.budget_start_day or settings.budget_start_day,
            week_start_day_of_week=(
                request_body.week_start_day_of_week
                if request_body.week_start_day_of_week is not None
                else settings.week_start_day_of_week
            ),
        )
        db.commit()

    except WorkspaceExistsError as e:
        db.rollback()
        logging.warning(f"Workspace setup rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=409, detail="Workspace already exists")

    logging.info("Workspace created", extra={"request_id": request_id, "workspace_id": str(workspace.id)})
    return to_workspace_response(workspace, user_id)


@router.get("/settings", response_model=WorkspaceResponse)
def get_settings(
    user_id: str = Depends(get_current_user_id),
    workspace: WorkspaceRecord = Depends(get_workspace),
):
    return to_workspace_response(workspace, user_id)


@router.put("/settings", response_model=WorkspaceResponse)
def update_settings(
    request_body: SettingsUpdateRequest,
    user_id: str = Depends(get_current_user_id),
    workspace: WorkspaceRecord = Depends(get_workspace),
    db: Session = Depends(get_db),
):
    """Update budgets, currency or language; unsupported languages are ignored"""
    WorkspaceRepository(db).update_settings(
        workspace,
        weekly_budget=request_body.weekly_budget,
        monthly_budget=request_body.monthly_budget,
        currency=request_body.currency,
        language=supported_language(request_body.language),
        budget_start_day=request_body.budget_start_day,
        week_start_day_of_week=request_body.week_start_day_of_week,
    )
    db.commit()
    return to_workspace_response(workspace, user_id)


@router.post("/settings/public-link", response_model=PublicLinkResponse, status_code=201)
def create_public_link(
    request: Request,
    user_id: str = Depends(get_current_user_id),
    workspace: WorkspaceRecord = Depends(get_workspace),
    db: Session = Depends(get_db),
):
    """Issue a new read-only link token, replacing any previous one (admin only)"""
    request_id = get_request_id(request)
    try:
        require_admin(workspace, user_id)
    except PermissionDeniedError as e:
        logging.warning(f"Public link denied: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=403, detail="Forbidden")

    token = generate_public_token(settings.public_token_length)
    WorkspaceRepository(db).set_public_token(workspace, token)
    db.commit()

    return PublicLinkResponse(public_token=token, public_path=f"/v1/public/{token}")


@router.delete("/settings/public-link", status_code=204)
def revoke_public_link(
    request: Request,
    user_id: str = Depends(get_current_user_id),
    workspace: WorkspaceRecord = Depends(get_workspace),
    db: Session = Depends(get_db),
):
    request_id = get_request_id(request)
    try:
        require_admin(workspace, user_id)
    except PermissionDeniedError as e:
        logging.warning(f"Public link revoke denied: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=403, detail="Forbidden")

    WorkspaceRepository(db).clear_public_token(workspace)
    db.commit()
