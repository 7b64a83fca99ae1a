"""SQLAlchemy ORM models for workspaces and purchases"""

import uuid
from sqlalchemy import Column, String, Boolean, Float, DateTime, Date, Integer, ForeignKey, Text, Uuid, UniqueConstraint
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func

Base = declarative_base()


class WorkspaceRecord(Base):
    """Shared budget space; every member sees the same purchases"""

    __tablename__ = "workspace"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    owner_uid = Column(Text, nullable=True)
    weekly_budget = Column(Float, nullable=False)
    monthly_budget = Column(Float, nullable=False)
    budget_start_day = Column(Integer, nullable=False, default=1)
    week_start_day_of_week = Column(Integer, nullable=False, default=0)
    currency = Column(String(3), nullable=False)
    language = Column(String(8), nullable=False, default="en")
    public_view_token = Column(Text, nullable=True, unique=True, index=True)
    public_view_created_at = Column(DateTime(timezone=True), nullable=True)
    public_view_revoked_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    members = relationship("WorkspaceMember", back_populates="workspace", cascade="all, delete-orphan")
    purchases = relationship("PurchaseRecord", back_populates="workspace", cascade="all, delete-orphan")


class WorkspaceMember(Base):
    """User membership in a workspace"""

    __tablename__ = "workspace_member"
    __table_args__ = (UniqueConstraint("workspace_id", "user_uid"),)

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    workspace_id = Column(Uuid(as_uuid=True), ForeignKey("workspace.id", ondelete="CASCADE"), nullable=False)
    user_uid = Column(Text, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    workspace = relationship("WorkspaceRecord", back_populates="members")


class PurchaseRecord(Base):
    """Logged purchase; soft-deleted rows stay until permanently removed"""

    __tablename__ = "purchase"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    workspace_id = Column(Uuid(as_uuid=True), ForeignKey("workspace.id", ondelete="CASCADE"), nullable=False, index=True)
    amount = Column(Float, nullable=False)
    currency = Column(String(3), nullable=False)
    date = Column(Date, nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    created_by_uid = Column(Text, nullable=True)
    deleted = Column(Boolean, nullable=False, default=False)
    deleted_at = Column(DateTime(timezone=True), nullable=True)
    deleted_by_uid = Column(Text, nullable=True)
    restored_at = Column(DateTime(timezone=True), nullable=True)
    restored_by_uid = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    workspace = relationship("WorkspaceRecord", back_populates="purchases")
