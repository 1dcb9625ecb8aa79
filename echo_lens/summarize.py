"""Neutral and opposing-viewpoint summaries from the OpenAI chat API.

The API key is passed in by the caller on every call; nothing here reads it
from the environment.
"""
import logging

import openai

from echo_lens.config import SUMMARY_MODEL, SUMMARY_MAX_CHARS

log = logging.getLogger(__name__)

NEUTRAL_PROMPT = """Please provide a neutral, factual summary of the following article. Focus on key facts and avoid opinionated language. Keep it concise (3-4 sentences):

{text}"""

OPPOSING_PROMPT = """Based on the following article, provide a summary of potential opposing viewpoints or counterarguments. Be respectful and balanced. Keep it concise (3-4 sentences):

{text}"""


def _complete(prompt: str, api_key: str, max_tokens: int = 200) -> str | None:
    if not api_key:
        log.warning("No OpenAI API key configured, skipping summary")
        return None
    try:
        client = openai.OpenAI(api_key=api_key)
        resp = client.chat.completions.create(
            model=SUMMARY_MODEL,
            max_tokens=max_tokens,
            temperature=0.7,
            messages=[{"role": "user", "content": prompt}],
        )
        content = resp.choices[0].message.content
        return content.strip() if content else None
    except Exception as e:
        log.warning("Summary request failed: %s", e)
        return None


def neutral_summary(text: str, api_key: str) -> str | None:
    return _complete(NEUTRAL_PROMPT.format(text=text[:SUMMARY_MAX_CHARS]), api_key)


def opposing_viewpoint(text: str, api_key: str) -> str | None:
    return _complete(OPPOSING_PROMPT.format(text=text[:SUMMARY_MAX_CHARS]), api_key)
