from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional


class CompletionRequest(BaseModel):
    prompt: str
    model: str
    temperature: float = Field(allow_inf_nan=False)
    max_tokens: int


class Choice(BaseModel):
    # A choice without text decodes as empty text
    text: Optional[str] = ""
    index: Optional[int] = None
    finish_reason: Optional[str] = None
    logprobs: Optional[Any] = None


class CompletionResponse(BaseModel):
    # Missing or null choices decode as an empty list
    choices: Optional[List[Choice]] = None
    # Informative fields; not required for extraction
    id: Optional[str] = None
    object: Optional[str] = None
    created: Optional[int] = None
    model: Optional[str] = None
    usage: Optional[Dict[str, Any]] = None
