"""Data access layer for workspaces and purchases"""

import uuid
from datetime import date, datetime, timezone
from typing import List, Optional
from sqlalchemy.orm import Session
from spendwise.infrastructure.database.models import WorkspaceRecord, WorkspaceMember, PurchaseRecord
from spendwise.domain.exceptions import PurchaseNotFoundError
from spendwise.domain.models import BudgetSettings, Purchase


def to_budget_settings(workspace: WorkspaceRecord, big_purchase_ratio: float) -> BudgetSettings:
    """Numeric configuration the allowance engine needs"""
    return BudgetSettings(
        monthly_budget=workspace.monthly_budget,
        budget_start_day=workspace.budget_start_day,
        weekly_budget=workspace.weekly_budget,
        week_start_day_of_week=workspace.week_start_day_of_week,
        big_purchase_ratio=big_purchase_ratio,
    )


def to_purchase(record: PurchaseRecord) -> Purchase:
    return Purchase(
        amount=record.amount,
        date=record.date,
        description=record.description or "",
        purchase_id=str(record.id),
    )


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class WorkspaceRepository:
    """Repository for workspaces and their membership"""

    def __init__(self, db: Session):
        self.db = db

    def create_workspace(
        self,
        owner_uid: str,
        weekly_budget: float,
        monthly_budget: float,
        currency: str,
        language: str,
        budget_start_day: int,
        week_start_day_of_week: int,
    ) -> WorkspaceRecord:
        """Create workspace; the owner becomes its first member"""
        workspace = WorkspaceRecord(
            owner_uid=owner_uid,
            weekly_budget=weekly_budget,
            monthly_budget=monthly_budget,
            currency=currency,
            language=language,
            budget_start_day=budget_start_day,
            week_start_day_of_week=week_start_day_of_week,
        )
        self.db.add(workspace)
        self.db.flush()

        self.db.add(WorkspaceMember(workspace_id=workspace.id, user_uid=owner_uid))
        self.db.flush()
        return workspace

    def get_by_member(self, user_uid: str) -> Optional[WorkspaceRecord]:
        """First workspace the user belongs to"""
        return (
            self.db.query(WorkspaceRecord)
            .join(WorkspaceMember, WorkspaceMember.workspace_id == WorkspaceRecord.id)
            .filter(WorkspaceMember.user_uid == user_uid)
            .order_by(WorkspaceRecord.created_at)
            .first()
        )

    def get_by_public_token(self, token: str) -> Optional[WorkspaceRecord]:
        if not token:
            return None
        return (
            self.db.query(WorkspaceRecord)
            .filter(WorkspaceRecord.public_view_token == token)
            .first()
        )

    def add_member(self, workspace: WorkspaceRecord, user_uid: str) -> WorkspaceMember:
        """Grant a user access; members are enrolled out of band, no route calls this"""
        member = WorkspaceMember(workspace_id=workspace.id, user_uid=user_uid)
        self.db.add(member)
        self.db.flush()
        return member

    def update_settings(self, workspace: WorkspaceRecord, **changes) -> WorkspaceRecord:
        """Apply non-None setting changes"""
        for name, value in changes.items():
            if value is not None:
                setattr(workspace, name, value)
        self.db.flush()
        return workspace

    def set_public_token(self, workspace: WorkspaceRecord, token: str) -> WorkspaceRecord:
        workspace.public_view_token = token
        workspace.public_view_created_at = _utcnow()
        self.db.flush()
        return workspace

    def clear_public_token(self, workspace: WorkspaceRecord) -> WorkspaceRecord:
        workspace.public_view_token = None
        workspace.public_view_revoked_at = _utcnow()
        self.db.flush()
        return workspace


class PurchaseRepository:
    """Repository for purchases, always scoped to one workspace"""

    def __init__(self, db: Session, workspace_id: uuid.UUID):
        self.db = db
        self.workspace_id = workspace_id

    def create_purchase(
        self,
        amount: float,
        currency: str,
        purchase_date: date,
        description: str,
        created_by_uid: str | None,
    ) -> PurchaseRecord:
        record = PurchaseRecord(
            workspace_id=self.workspace_id,
            amount=amount,
            currency=currency,
            date=purchase_date,
            description=description,
            created_by_uid=created_by_uid,
            deleted=False,
        )
        self.db.add(record)
        self.db.flush()
        return record

    def get_purchase(self, purchase_id: uuid.UUID) -> Optional[PurchaseRecord]:
        return (
            self.db.query(PurchaseRecord)
            .filter(PurchaseRecord.id == purchase_id, PurchaseRecord.workspace_id == self.workspace_id)
            .first()
        )

    def require_purchase(self, purchase_id: uuid.UUID) -> PurchaseRecord:
        """
        Raises:
            PurchaseNotFoundError: Missing or owned by another workspace
        """
        record = self.get_purchase(purchase_id)
        if record is None:
            raise PurchaseNotFoundError(f"Purchase {purchase_id} not found")
        return record

    def update_purchase(
        self,
        record: PurchaseRecord,
        amount: float,
        purchase_date: date,
        description: str,
    ) -> PurchaseRecord:
        record.amount = amount
        record.date = purchase_date
        record.description = description
        self.db.flush()
        return record

    def soft_delete(self, record: PurchaseRecord, user_uid: str) -> PurchaseRecord:
        record.deleted = True
        record.deleted_at = _utcnow()
        record.deleted_by_uid = user_uid
        self.db.flush()
        return record

    def restore(self, record: PurchaseRecord, user_uid: str) -> PurchaseRecord:
        record.deleted = False
        record.restored_at = _utcnow()
        record.restored_by_uid = user_uid
        self.db.flush()
        return record

    def delete_permanently(self, record: PurchaseRecord) -> None:
        self.db.delete(record)
        self.db.flush()

    def list_active(self, start: date, end: date) -> List[PurchaseRecord]:
        """Non-deleted purchases dated within [start, end]"""
        return self._in_range(start, end).filter(PurchaseRecord.deleted.is_(False)).all()

    def list_deleted(self, start: date, end: date) -> List[PurchaseRecord]:
        """Trash: soft-deleted purchases dated within [start, end], newest first"""
        return self._in_range(start, end).filter(PurchaseRecord.deleted.is_(True)).all()

    def _in_range(self, start: date, end: date):
        return (
            self.db.query(PurchaseRecord)
            .filter(
                PurchaseRecord.workspace_id == self.workspace_id,
                PurchaseRecord.date >= start,
                PurchaseRecord.date <= end,
            )
            .order_by(PurchaseRecord.date.desc(), PurchaseRecord.created_at.desc())
        )
