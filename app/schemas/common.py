from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    detail: str = Field(description="Error detail", examples=["News item not found"])
