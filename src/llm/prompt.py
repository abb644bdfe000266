"""Prompt assembly with memory context."""

import json
import logging

from src.memory.models import MemoryRecord

logger = logging.getLogger(__name__)

CONTEXT_SEPARATOR = "\n\n"


def _memory_text(record: MemoryRecord) -> str:
    """Text a memory contributes to the context block.

    Structured content is rendered as JSON. Interaction records have no
    ``content``; their query and response are used instead.
    """
    if record.content:
        if isinstance(record.content, str):
            return record.content
        return json.dumps(record.content, default=str)
    extra = record.model_extra or {}
    query = extra.get("query")
    response = extra.get("response")
    if query and response:
        return f"Q: {query}\nA: {response}"
    return str(query or response or "")


def build_context(records: list[MemoryRecord]) -> str:
    """Join the memories' text with blank lines, skipping empty ones."""
    return CONTEXT_SEPARATOR.join(text for text in map(_memory_text, records) if text)


def build_prompt(query: str, context: str = "") -> str:
    """Prefix *query* with a labelled context block when there is context."""
    if not context:
        return query
    return f"Context from memory:\n{context}\n\nUser query: {query}"
