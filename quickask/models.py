from pydantic import BaseModel, ConfigDict
from typing import Optional, Literal, List, Dict, Any


class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["system", "user", "assistant"]
    content: str


class CompletionRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    messages: List[Message]
    model: str
    temperature: Optional[float] = None  # service decides the valid range

    def to_payload(self) -> Dict[str, Any]:
        """Wire payload for the chat-completions endpoint; unset params are omitted."""
        return self.model_dump(exclude_none=True)


class Variant(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    request: CompletionRequest
    output: Literal["content", "message"] = "content"
