"""Shared response schemas."""

from pydantic import BaseModel


class PingResponse(BaseModel):
    message: str
    version: str
    env: str
