# quickask/prompts.py

from typing import Dict

from quickask.models import CompletionRequest, Message, Variant

HELPFUL_ASSISTANT_SYSTEM = "You are helpful assistant."

CAPITAL_QUESTION = "What is the capital of Ireland"

RECIPE_SYSTEM = "You are a helpful assistant."

RECIPE_QUESTION = "Hello! Give me a recipe for a chocolate cake."


VARIANTS: Dict[str, Variant] = {
    "capital": Variant(
        name="capital",
        request=CompletionRequest(
            model="gpt-4",
            messages=[
                Message(role="system", content=HELPFUL_ASSISTANT_SYSTEM),
                Message(role="user", content=CAPITAL_QUESTION)
            ],
            temperature=2
        ),
        output="content"
    ),
    "recipe": Variant(
        name="recipe",
        request=CompletionRequest(
            model="gpt-3.5-turbo",
            messages=[
                Message(role="system", content=RECIPE_SYSTEM),
                Message(role="user", content=RECIPE_QUESTION)
            ]
        ),
        output="message"
    ),
}


def get_variant(name: str) -> Variant:
    try:
        return VARIANTS[name]
    except KeyError:
        raise KeyError(f"Unknown variant '{name}' (known: {', '.join(sorted(VARIANTS))})") from None
