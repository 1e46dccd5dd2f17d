from __future__ import annotations

from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..common.datetime_utils import parse_iso_date
from .model import NewLeaveRequest


class CreateLeaveRequestSchema(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    leave_type_id: str = Field(alias="leaveTypeId", min_length=1)
    start_date: date = Field(alias="startDate")
    end_date: date = Field(alias="endDate")
    reason: str = Field(min_length=1)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _truncate_datetime(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return parse_iso_date(value)
            except ValueError:
                raise ValueError("must be an ISO date (YYYY-MM-DD)")
        return value

    def to_new_request(self) -> NewLeaveRequest:
        return NewLeaveRequest(
            leave_type_id=self.leave_type_id,
            start_date=self.start_date,
            end_date=self.end_date,
            reason=self.reason,
        )


class LeaveDecisionSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    comment: Optional[str] = None
