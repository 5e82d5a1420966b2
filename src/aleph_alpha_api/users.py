"""User settings models for ``/users/me``."""
from __future__ import annotations

from pydantic import ConfigDict

from aleph_alpha_api.common.schema import ResponseModel, WireModel


class UserDetail(ResponseModel):
    # Some API versions send the credit amounts as strings, others as numbers.
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: int
    email: str
    role: str
    credits_remaining: str
    invoice_allowed: bool
    out_of_credits_threshold: str
    terms_of_service_version: str


class UserChange(WireModel):
    out_of_credits_threshold: int
