"""Dependency injection for FastAPI endpoints"""

from datetime import date
from fastapi import Depends, Header, HTTPException, Request
from sqlalchemy.orm import Session

from spendwise.config import settings
from spendwise.domain.exceptions import WorkspaceNotFoundError
from spendwise.domain.models import BudgetSettings
from spendwise.infrastructure.database.models import WorkspaceRecord
from spendwise.infrastructure.database.repositories import WorkspaceRepository, to_budget_settings
from spendwise.infrastructure.database.session import get_db


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_current_user_id(x_user_id: str = Header(..., min_length=1)) -> str:
    """Caller identity, set by the upstream identity layer"""
    return x_user_id


def get_today() -> date:
    """Wall-clock day; overridden in tests"""
    return date.today()


def load_workspace(db: Session, user_id: str) -> WorkspaceRecord:
    """
    Raises:
        WorkspaceNotFoundError: User is not a member of any workspace
    """
    workspace = WorkspaceRepository(db).get_by_member(user_id)
    if workspace is None:
        raise WorkspaceNotFoundError(f"No workspace for user {user_id}")
    return workspace


def get_workspace(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> WorkspaceRecord:
    """Workspace of the calling user; 404 until one is set up"""
    try:
        return load_workspace(db, user_id)
    except WorkspaceNotFoundError:
        raise HTTPException(status_code=404, detail="Workspace not found")


def get_budget_settings(workspace: WorkspaceRecord) -> BudgetSettings:
    return to_budget_settings(workspace, settings.big_purchase_ratio)
