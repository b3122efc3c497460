"""
quickask — send one chat-completion request and print the answer.

Usage:
    from quickask import QuickAsk

    answer = QuickAsk(
        prompt="What is the capital of Ireland",
        model="gpt-4",
        temperature=2
    ).ask()

From the shell:
    API_KEY=sk-... python -m quickask
"""

from quickask.config import Settings
from quickask.invoker import CompletionInvoker
from quickask.models import CompletionRequest, Message
from quickask.prompts import HELPFUL_ASSISTANT_SYSTEM
from typing import Optional


class QuickAsk:

    def __init__(
        self,
        prompt: str,
        system_prompt: str = HELPFUL_ASSISTANT_SYSTEM,
        model: str = "gpt-4",
        temperature: Optional[float] = None,
        api_key: Optional[str] = None
    ):
        settings = Settings()
        if api_key is not None:
            settings = settings.model_copy(update={"api_key": api_key})
        self._invoker = CompletionInvoker(settings)
        self._request = CompletionRequest(
            model=model,
            messages=[
                Message(role="system", content=system_prompt),
                Message(role="user", content=prompt)
            ],
            temperature=temperature
        )

    def ask(self) -> Optional[str]:
        """Send the request and return the first choice's content."""
        response = self._invoker.invoke(self._request)
        return self._invoker.select(response, "content")


def ask(
    prompt: str,
    system_prompt: str = HELPFUL_ASSISTANT_SYSTEM,
    model: str = "gpt-4",
    temperature: Optional[float] = None,
    api_key: Optional[str] = None
) -> Optional[str]:

    return QuickAsk(
        prompt=prompt,
        system_prompt=system_prompt,
        model=model,
        temperature=temperature,
        api_key=api_key
    ).ask()
