from openai import OpenAI
from openai.types.chat import ChatCompletion

from quickask.models import CompletionRequest, Message

# Sent in place of a missing key; the SDK refuses empty keys, the service refuses this one.
MISSING_API_KEY = "missing-api-key"


class OpenAIClient:
    def __init__(self, api_key: str | None = None, base_url: str | None = None, http_client=None):
        # Retries are off: one invocation is one request.
        self.client = OpenAI(
            api_key=api_key or MISSING_API_KEY,
            base_url=base_url or None,
            max_retries=0,
            http_client=http_client
        )

    def create(self, request: CompletionRequest) -> ChatCompletion:
        return self.client.chat.completions.create(**request.to_payload())

    def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        model: str = "gpt-4",
        temperature: float | None = None
    ) -> str:
        request = CompletionRequest(
            model=model,
            messages=[
                Message(role="system", content=system_prompt),
                Message(role="user", content=user_prompt)
            ],
            temperature=temperature
        )
        response = self.create(request)
        return response.choices[0].message.content
