# This file defines shared schema pieces reused by the JSON endpoints.
# It exists so envelope metadata stays consistent across responses.

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class EnvelopeFields(BaseModel):
    api_version: str
    schema_version: str
    request_id: str
    generated_at: datetime
