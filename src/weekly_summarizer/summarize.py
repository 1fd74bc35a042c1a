"""
Generate weekly summaries using the Claude API.

This module handles:
- Deriving an API client from settings (or None when no key is set)
- Building the user message from the week's daily notes
- Calling the Claude API with a fixed system prompt
- Falling back to a fixed message when the response has no text
"""

# The anthropic package is the official Python SDK for Claude
import anthropic

from .errors import ServiceError
from .journal import DailyNote

DEFAULT_MODEL = "claude-sonnet-4-5"
DEFAULT_MAX_TOKENS = 1000
DEFAULT_TEMPERATURE = 0.7

FALLBACK_SUMMARY = "Could not generate a summary."

SYSTEM_PROMPT = """The following are one week of daily notes. Analyze them and summarize the week using exactly this structure:

## Major events this week

## Achievements this week

## Things learned this week

## Issues noticed

## Next actions

If a section has nothing to report, write "None". Always leave a blank line after each heading."""


def derive_client(settings: dict) -> anthropic.Anthropic | None:
    """
    Build a Claude client from settings, or None if no API key is set.

    The client is derived fresh from settings on every run and passed
    explicitly to generate_summary(), so a key changed with --set-api-key
    takes effect on the next run.

    Syntax notes:
    - `anthropic.Anthropic | None` says the function returns a client or None
    - (value or "") turns None into "" so .strip() is always safe

    Args:
        settings: Settings dict from config.load_settings()

    Returns:
        An anthropic.Anthropic client, or None.
    """
    api_key = (settings.get("api_key") or "").strip()
    if not api_key:
        return None
    return anthropic.Anthropic(api_key=api_key)


def build_user_content(notes: list[DailyNote]) -> str:
    """
    Join daily notes into one message, each under a "# <date>" heading.

    Args:
        notes: Daily notes, oldest first (the order is kept as-is)

    Returns:
        The text sent as the user message.
    """
    return "\n\n".join(f"# {note.date}\n{note.content}" for note in notes)


def generate_summary(
    client: anthropic.Anthropic,
    user_content: str,
    model: str | None = None,
    max_tokens: int | None = None,
    temperature: float | None = None,
) -> str:
    """
    Ask Claude to summarize a week of notes.

    Args:
        client: Client from derive_client()
        user_content: Output of build_user_content()
        model: Claude model. Defaults to DEFAULT_MODEL.
        max_tokens: Response length limit. Defaults to DEFAULT_MAX_TOKENS.
        temperature: Sampling temperature. Defaults to DEFAULT_TEMPERATURE.

    Returns:
        The summary text, or FALLBACK_SUMMARY if the response had no text.

    Raises:
        ServiceError: If the API call fails (bad key, network, server error).
    """
    try:
        message = client.messages.create(
            model=model or DEFAULT_MODEL,
            max_tokens=max_tokens or DEFAULT_MAX_TOKENS,
            temperature=DEFAULT_TEMPERATURE if temperature is None else temperature,
            system=SYSTEM_PROMPT,
            messages=[
                {
                    "role": "user",
                    "content": user_content,
                }
            ],
        )
    except anthropic.APIError as e:
        # APIError covers auth failures, connection errors and bad statuses
        raise ServiceError(f"Claude API error: {e}") from e

    # message.content is a list of content blocks; keep only the text ones
    blocks = getattr(message, "content", None) or []
    text = "".join(getattr(block, "text", "") or "" for block in blocks).strip()
    return text or FALLBACK_SUMMARY
