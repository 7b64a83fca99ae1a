"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field, field_validator
import datetime
from typing import List, Optional

from spendwise.config import settings


class WorkspaceCreateRequest(BaseModel):
    """Request body for POST /v1/workspaces"""

    weekly_budget: float = Field(..., gt=0, description="Weekly budget in workspace currency")
    currency: str = Field(..., min_length=3, max_length=3, description="ISO 4217 currency code")
    language: Optional[str] = None
    monthly_budget: Optional[float] = Field(None, gt=0)
    budget_start_day: Optional[int] = Field(None, ge=1, le=28)
    week_start_day_of_week: Optional[int] = Field(None, ge=0, le=6, description="0=Sunday .. 6=Saturday")

    @field_validator("currency")
    @classmethod
    def upper_currency(cls, value: str) -> str:
        return value.strip().upper()


class SettingsUpdateRequest(BaseModel):
    """Request body for PUT /v1/settings; omitted fields are left unchanged"""

    weekly_budget: Optional[float] = Field(None, gt=0)
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    language: Optional[str] = None
    monthly_budget: Optional[float] = Field(None, gt=0)
    budget_start_day: Optional[int] = Field(None, ge=1, le=28)
    week_start_day_of_week: Optional[int] = Field(None, ge=0, le=6)

    @field_validator("currency")
    @classmethod
    def upper_currency(cls, value: Optional[str]) -> Optional[str]:
        return value.strip().upper() if value else value


class WorkspaceResponse(BaseModel):
    """Workspace settings"""

    workspace_id: str
    weekly_budget: float
    monthly_budget: float
    budget_start_day: int
    week_start_day_of_week: int
    currency: str
    language: str
    has_public_link: bool
    public_token: Optional[str] = None
    is_admin: bool


class PublicLinkResponse(BaseModel):
    public_token: str
    public_path: str


class PurchaseRequest(BaseModel):
    """Request body for POST /v1/purchases and PUT /v1/purchases/{id}"""

    amount: float = Field(..., gt=0, description="Amount in workspace currency")
    date: Optional[datetime.date] = Field(None, description="Day the spend is attributed to (default: today)")
    description: str = Field("", max_length=500)

    @field_validator("description")
    @classmethod
    def strip_description(cls, value: str) -> str:
        return value.strip()


class PurchaseResponse(BaseModel):
    purchase_id: str
    amount: float
    amount_formatted: str
    currency: str
    date: datetime.date
    description: str
    deleted: bool


class TrashResponse(BaseModel):
    purchases: List[PurchaseResponse]


class AllowanceSchema(BaseModel):
    days_in_range: int
    daily_budget: float
    days_elapsed: int
    allowed_by_today: float


class MonthlySummarySchema(BaseModel):
    cycle_start: datetime.date
    cycle_end: datetime.date
    budget: float
    spent: float
    budget_left: float
    budget_left_formatted: str
    allowance: AllowanceSchema
    spent_to_date: float
    allowed_by_today_net: float
    allowed_by_today_net_formatted: str


class IconLayoutSchema(BaseModel):
    total_icons: int
    used_icons: int
    big_icons: int
    small_icons: int
    empty_icons: int
    warning_icons_total: int
    first_row_warnings: int
    warning_rows: List[int]


class WeeklySummarySchema(BaseModel):
    week_start: datetime.date
    week_end: datetime.date
    week_range: str
    budget: float
    big_threshold: float
    spent_total: float
    big_total: float
    small_total: float
    big_count: int
    small_count: int
    left: float
    status: str
    allowance: AllowanceSchema
    spent_to_date: float
    allowed_by_today_net: float
    icons: IconLayoutSchema
    is_current_week: bool


class SummaryResponse(BaseModel):
    """Response for GET /v1/summary"""

    today: datetime.date
    currency: str
    monthly: MonthlySummarySchema
    weekly: WeeklySummarySchema


class DaySchema(BaseModel):
    date: datetime.date
    day_name: str
    total: float
    total_formatted: str
    purchases: List[PurchaseResponse]


class WeekDetailsResponse(BaseModel):
    """Response for GET /v1/details"""

    week_start: datetime.date
    week_end: datetime.date
    week_range: str
    currency: str
    days: List[DaySchema]
    previous_start: datetime.date
    next_start: datetime.date
    next_disabled: bool


def supported_language(language: Optional[str]) -> Optional[str]:
    """Language code if supported, else None"""
    if language and language in settings.supported_languages:
        return language
    return None
