"""Main CLI entry point for hf-chat.

Commands:
    hf-chat generate <prompt> [options]
    hf-chat models
"""

import asyncio
import logging
import sys
from typing import Any

import click

from ..config import LLMConfig
from ..exceptions import LLMError
from ..factory import create_language_model
from ..models import FREE_MODELS
from ..providers.base import BaseLanguageModel
from ..registry import create_default_provider, is_test_environment
from ..types import GenerationRequest, SystemTurn, TextDelta, TextPart, UserTurn


def run_async(coro: Any) -> Any:
    """Run an async coroutine synchronously."""
    return asyncio.run(coro)


def resolve_model(name: str) -> BaseLanguageModel:
    """Resolve an alias ("chat-model") or a Hub model identifier to a model."""
    provider = create_default_provider()
    if name in provider:
        return provider.language_model(name)
    if is_test_environment():
        return create_language_model(LLMConfig(provider="mock", model=name))
    return create_language_model(LLMConfig(provider="huggingface", model=name))


async def _stream_to_stdout(model: BaseLanguageModel, request: GenerationRequest) -> None:
    async for event in model.do_stream(request):
        if isinstance(event, TextDelta):
            click.echo(event.text_delta, nl=False)
    click.echo()


@click.group()
@click.version_option(version="0.1.0", prog_name="hf-chat")
def cli() -> None:
    """hf-chat - Chat with Hugging Face text generation models.

    \b
    Commands:
        hf-chat generate "<prompt>" [--model chat-model] [--stream]
        hf-chat models
    """
    pass


# =============================================================================
# Generate Command
# =============================================================================


@cli.command()
@click.argument("prompt")
@click.option(
    "--model", "-m", "model_name", default="chat-model", help="Model alias or Hub model id"
)
@click.option("--system", "-s", help="System instruction")
@click.option("--max-tokens", type=click.IntRange(min=1), help="Maximum new tokens (capped at 512)")
@click.option("--temperature", type=click.FloatRange(min=0.0), help="Sampling temperature")
@click.option("--top-p", type=click.FloatRange(min=0.0, max=1.0, min_open=True), help="Top-p")
@click.option("--stream", is_flag=True, help="Print the answer word by word")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def generate(
    prompt: str,
    model_name: str,
    system: str | None,
    max_tokens: int | None,
    temperature: float | None,
    top_p: float | None,
    stream: bool,
    verbose: bool,
) -> None:
    """Generate a reply to a single prompt.

    \b
    Examples:
        hf-chat generate "Tell me a joke"
        hf-chat generate "Summarize HTTP" -m google/flan-t5-base --stream
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    turns: list[Any] = []
    if system:
        turns.append(SystemTurn(content=system))
    turns.append(UserTurn(content=[TextPart(text=prompt)]))

    request = GenerationRequest(
        prompt=turns,
        max_output_tokens=max_tokens,
        temperature=temperature,
        top_p=top_p,
    )

    try:
        model = resolve_model(model_name)
    except ValueError as e:
        click.echo(f"Error: {e}")
        sys.exit(1)

    if stream:
        try:
            run_async(_stream_to_stdout(model, request))
        except LLMError as e:
            click.echo(f"Error: Generation failed: {e}")
            sys.exit(1)
    else:
        result = run_async(model.do_generate(request))
        click.echo(result.text)


# =============================================================================
# Models Command
# =============================================================================


@cli.command()
def models() -> None:
    """List model aliases and free Hugging Face models."""
    provider = create_default_provider()

    click.echo("Model aliases:")
    for alias in provider.list_models():
        click.echo(f"  {alias}: {provider.language_model(alias).model_id}")

    click.echo("Free models:")
    for model_id in FREE_MODELS.values():
        click.echo(f"  - {model_id}")


if __name__ == "__main__":
    cli()
