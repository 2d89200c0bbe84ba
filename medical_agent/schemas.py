from pydantic import BaseModel, Field
from typing import Any, Dict, Literal, Optional

# -----------------------------
# API SCHEMAS
# -----------------------------
class AskRequest(BaseModel):
    question: Optional[str] = None

class AskResponse(BaseModel):
    response: str
    type: Literal['prescription', 'general']

class ErrorResponse(BaseModel):
    error: str

# -----------------------------
# MODEL OUTPUT
# -----------------------------
class ToolCallIntent(BaseModel):
    """A function call the model asked us to run."""
    tool_name: str
    arguments: Dict[str, Any] = Field(default_factory=dict)
