from quickask.config import get_settings
from quickask.invoker import CompletionInvoker
from quickask.prompts import get_variant


def main():
    settings = get_settings()
    variant = get_variant(settings.variant)
    CompletionInvoker(settings).run(variant)


if __name__ == "__main__":
    main()
