from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body returned with every HTTP 500"""

    error: str = Field(..., description="Human readable message, never the underlying error")


class BatchCreateResponse(BaseModel):
    """Result of a batch insert"""

    count: int = Field(..., description="Number of rows inserted")
