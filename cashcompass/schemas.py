from datetime import date
from typing import Annotated, List, Literal, Optional

from pydantic import (
    AliasChoices, BaseModel, ConfigDict, Field, StringConstraints, TypeAdapter, field_validator,
)

Stripped = Annotated[str, StringConstraints(strip_whitespace=True)]
Trimmed = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class _Body(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True, str_strip_whitespace=True)


class _CredentialBody(BaseModel):
    # passwords are hashed exactly as sent
    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class RegisterIn(_CredentialBody):
    username: Trimmed
    email: Annotated[str, StringConstraints(strip_whitespace=True, min_length=3)]
    password: str = Field(min_length=1)


class LoginIn(_CredentialBody):
    email: Trimmed
    password: str = Field(min_length=1)


class ProfileUpdateIn(_CredentialBody):
    current_password: str = Field(alias="currentPassword")
    username: Optional[Stripped] = None
    email: Optional[Stripped] = None
    new_password: Optional[str] = Field(None, alias="newPassword")


class RecurrenceIn(_Body):
    period: Literal["monthly", "yearly"]


class EntryCreate(_Body):
    kind: Literal["income", "expense"] = Field(alias="type")
    category: str = Field(min_length=1)
    amount: float = Field(ge=0, allow_inf_nan=False)
    # the Entry document stored this as "description"
    note: str = Field("", validation_alias=AliasChoices("note", "description"))
    occurs_on: date = Field(default_factory=date.today, alias="date")
    recurrence: Optional[RecurrenceIn] = None

    @field_validator("occurs_on", mode="before")
    @classmethod
    def blank_date_is_today(cls, value):
        # the add-entry form posts "" when no date is picked
        if value is None or (isinstance(value, str) and not value.strip()):
            return date.today()
        return value


class EntryUpdate(_Body):
    kind: Optional[Literal["income", "expense"]] = Field(None, alias="type")
    category: Optional[str] = Field(None, min_length=1)
    amount: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    note: Optional[str] = Field(None, validation_alias=AliasChoices("note", "description"))
    occurs_on: Optional[date] = Field(None, alias="date")


class BudgetSetIn(_Body):
    amount: float = Field(ge=0, allow_inf_nan=False)


class PlanLineIn(_Body):
    category: str = Field(min_length=1)
    icon: Optional[str] = None
    planned: float = Field(0.0, allow_inf_nan=False)
    actual: float = Field(0.0, allow_inf_nan=False)
    notes: str = ""


plan_lines_adapter = TypeAdapter(List[PlanLineIn])
