"""Retrieve-then-generate: recent memories as context for one model call.

The pipeline is strictly sequential: fetch memories, build the prompt,
call the model, persist the exchange. Only the model call is fatal;
memory fetch and persistence degrade to "no context" / "not saved".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from src.llm.prompt import build_context, build_prompt
from src.outcome import Outcome, best_effort

if TYPE_CHECKING:
    from src.integrations.vertex import GenerativeModel
    from src.memory.models import MemoryRecord
    from src.memory.store import MemoryStore

logger = logging.getLogger(__name__)

CONTEXT_MEMORY_LIMIT = 5


@dataclass
class Answer:
    """Result of one AI query."""

    query: str
    response: str
    model: str
    context_used: bool
    memories_referenced: int


async def answer(
    memory: MemoryStore,
    generator: GenerativeModel,
    query: str,
    model: str,
    use_memory: bool = True,
) -> Answer:
    """Answer *query* with *model*, optionally grounded on recent memories."""
    memories: Outcome[list[MemoryRecord]] = Outcome([])
    if use_memory:
        memories = await best_effort(
            "Memory fetch", memory.recent(CONTEXT_MEMORY_LIMIT), default=[]
        )

    context = build_context(memories.value)
    prompt = build_prompt(query, context)

    response = await generator.generate(model, prompt)

    saved = await best_effort(
        "Memory store",
        memory.record_interaction(query, response, model, context_used=bool(context)),
        default=None,
    )
    if not saved.degraded:
        logger.debug("Interaction stored as memory %s", saved.value.id)

    return Answer(
        query=query,
        response=response,
        model=model,
        context_used=bool(context),
        memories_referenced=len(memories.value),
    )
