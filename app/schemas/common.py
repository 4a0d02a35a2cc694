"""Generic response schemas and shared field types."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field

# Upper bound of a 32-bit signed INTEGER primary key.
MAX_ROW_ID = 2_147_483_647

RowId = Annotated[int, Field(ge=1, le=MAX_ROW_ID)]


class MessageResponse(BaseModel):
    message: str
