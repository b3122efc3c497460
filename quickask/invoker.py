from typing import Optional

from openai import OpenAIError
from openai.types.chat import ChatCompletion

from quickask.config import Settings
from quickask.llm import OpenAIClient
from quickask.log import get_logger
from quickask.models import CompletionRequest, Variant


class CompletionInvoker:
    def __init__(
        self,
        settings: Settings,
        llm: Optional[OpenAIClient] = None
    ):
        self.settings = settings
        self.llm = llm or OpenAIClient(settings.api_key, settings.api_base)
        self.logger = get_logger("quickask", settings.log_level)

    # =========================================================
    # Request
    # =========================================================
    def invoke(self, request: CompletionRequest) -> ChatCompletion:
        """Send one chat-completion request. Errors from the service propagate as-is."""
        self.logger.info(
            "Requesting completion model=%s messages=%d temperature=%s",
            request.model,
            len(request.messages),
            request.temperature
        )

        try:
            response = self.llm.create(request)
        except OpenAIError as e:
            self.logger.error("Completion failed: %s: %s", type(e).__name__, e)
            raise

        if response.choices:
            self.logger.info(
                "Received %d choice(s), finish_reason=%s",
                len(response.choices),
                response.choices[0].finish_reason
            )
        return response

    # =========================================================
    # Output
    # =========================================================
    def select(self, response: ChatCompletion, output: str = "content") -> Optional[str]:
        """Pick the printed value from the first choice."""
        message = response.choices[0].message
        if output == "content":
            return message.content
        if output == "message":
            return message.model_dump_json(exclude_none=True)
        raise ValueError(f"Unknown output field '{output}'")

    def run(self, variant: Variant) -> Optional[str]:
        response = self.invoke(variant.request)
        value = self.select(response, variant.output)
        # Refusals and tool-call replies carry no content
        print("" if value is None else value)
        return value
