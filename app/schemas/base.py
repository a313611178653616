"""
Base Schemas

Core Pydantic models shared by all API responses.
Every endpoint answers with the same {message, data, proofs} envelope.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, ConfigDict


class Proofs(BaseModel):
    """
    Proof/tracing information included in all responses.

    Standard fields:
    - trace_id: Request trace ID
    - user_id: Caller identity (from x-user-id)
    - sources: Data sources used (fleet service, load board)
    - algorithm: Algorithm identifier (e.g., "deterministic_weighted_scoring")
    - latency_ms: Optional response time
    """
    trace_id: Optional[str] = Field(None, description="Request trace ID")
    user_id: Optional[str] = Field(None, description="Caller identity")
    sources: Optional[List[Any]] = Field(None, description="Data sources (list of dicts or strings)")
    algorithm: Optional[str] = Field(None, description="Algorithm identifier")
    latency_ms: Optional[float] = Field(None, description="Response time in milliseconds")

    model_config = ConfigDict(extra="allow")  # Allow extra fields for forward compatibility


class ServiceResponse(BaseModel):
    """
    Standard response structure.

    - message: User-facing message
    - data: Typed payload (varies by endpoint)
    - proofs: Tracing and source information
    """
    message: str = Field(..., description="User-facing response message")
    data: Optional[Dict[str, Any]] = Field(None, description="Response data payload")
    proofs: Optional[Proofs] = Field(None, description="Proof/tracing information")

    model_config = ConfigDict(extra="allow")
