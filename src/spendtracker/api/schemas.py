"""Pydantic response and request models for the HTTP API.

JSON uses camelCase keys; amounts are emitted as numbers.
"""

import datetime as dt
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ImportOutcomeOut(ApiModel):
    total_records: int
    successful_imports: int
    failed_imports: int
    upload_batch_id: str
    errors: list[str]


class TransactionOut(ApiModel):
    id: int
    date: dt.date
    description: str
    debit: Optional[Money] = None
    credit: Optional[Money] = None
    balance: Optional[Money] = None
    category_id: Optional[int] = None
    category_name: Optional[str] = None
    upload_batch_id: str
    created_date: dt.datetime


class AssignCategoryIn(ApiModel):
    category_id: int


class BulkCategorizeIn(ApiModel):
    transaction_ids: list[int] = Field(default_factory=list)
    category_id: int


class BulkCategorizeOut(ApiModel):
    processed: int
    failed: int
    errors: list[str]


class CategoryIn(ApiModel):
    name: str
    description: Optional[str] = None


class CategoryOut(ApiModel):
    id: int
    name: str
    description: Optional[str] = None
    created_date: dt.datetime
    transaction_count: int
    total_spending: Money


class MonthlySpendingOut(ApiModel):
    year: int
    month: int
    month_name: str
    total_spending: Money
    transaction_count: int


class CategorySpendingOut(ApiModel):
    category_id: int
    category_name: str
    total_spending: Money
    transaction_count: int
    monthly_breakdown: list[MonthlySpendingOut]
