"""Main CLI application using Typer."""
import asyncio
import logging
import os

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from ..chat import check_prompt_length, complete
from ..config import Settings, load_settings
from ..errors import ConfigError, InputTooLongError
from ..messages import message
from ..text import strip_markdown
from .config import LOG_LEVEL_ENV, LogLevel
from .providers import get_llm
from .spinner import loading

# Load environment variables
load_dotenv()

app = typer.Typer(
    name="dsprompt",
    help="Send prompts to DeepSeek chat and print the reply without markdown",
    add_completion=False,
)

# Console for rich output; diagnostics must not be re-wrapped
console = Console(soft_wrap=True)
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Route dsprompt logs to stderr at the level named in the environment."""
    package_logger = logging.getLogger("dsprompt")
    package_logger.setLevel(LogLevel.from_string(os.getenv(LOG_LEVEL_ENV)))
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(
            RichHandler(console=err_console, show_path=False, rich_tracebacks=True)
        )


async def handle_prompt(settings: Settings, prompt: str) -> None:
    """Run one iteration: length check, request, cleanup, print.

    Each request gets its own provider and event loop.
    """
    language = settings.language
    try:
        check_prompt_length(prompt, settings.max_input_length)
    except InputTooLongError as e:
        console.print(f"[yellow]{message('too_long', language, limit=e.limit)}[/yellow]")
        return

    async with get_llm(settings) as provider:
        async with loading(console, message("loading", language)):
            reply = await complete(
                provider,
                prompt,
                settings.max_output_tokens,
                console,
                language,
            )

    # Character count stands in for tokens here
    if len(reply) > settings.max_output_tokens:
        console.print(f"[yellow]{message('output_warning', language)}[/yellow]")

    console.print(message("result_header", language))
    console.print(strip_markdown(reply), markup=False, highlight=False)


def run_session(settings: Settings, prompt: str | None = None) -> None:
    """Answer one prompt, or keep reading prompts until end of input.

    Args:
        settings: Loaded configuration
        prompt: One-shot prompt; None starts the interactive loop
    """
    while True:
        if prompt is not None:
            text = prompt
        else:
            console.print(message("prompt", settings.language, limit=settings.max_input_length))
            try:
                text = console.input()
            except (EOFError, KeyboardInterrupt):
                console.print()
                break
            if not text.strip():
                continue

        asyncio.run(handle_prompt(settings, text))

        if prompt is not None:
            break

    logger.debug("Session finished")


@app.command()
def ask(
    prompt: str | None = typer.Argument(
        None,
        help="Prompt to send once; omit it to enter prompts interactively"
    )
):
    """Send a prompt to DeepSeek and print the reply without markdown."""
    configure_logging()

    try:
        settings = load_settings()
    except ConfigError as e:
        console.print(f"[red]{escape(message('config_detail', error=e))}[/red]")
        console.print(f"[red]{message('config_failed')}[/red]")
        raise typer.Exit(code=1)

    logger.debug(
        "Loaded settings: model=%s base_url=%s max_input_length=%d max_output_tokens=%d",
        settings.model, settings.base_url, settings.max_input_length, settings.max_output_tokens
    )

    run_session(settings, prompt or None)


if __name__ == "__main__":
    app()
