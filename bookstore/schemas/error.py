from pydantic import BaseModel
from typing import List, Optional, Union


class ValidationErrorDetail(BaseModel):
    loc: List[Union[str, int]]
    msg: str


class ErrorResponse(BaseModel):
    status: int
    message: str
    errors: Optional[List[ValidationErrorDetail]] = None
