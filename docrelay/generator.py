"""Gemini generation adapter returning the text parts of a single candidate."""

import asyncio
import logging
from typing import List

import google.genai as genai
from google.genai import types

from docrelay.errors import RelayError, UnexpectedContentPart

logger = logging.getLogger(__name__)

COMPLETED_FINISH_REASONS = {None, types.FinishReason.STOP, types.FinishReason.MAX_TOKENS}


def _part_kind(part: types.Part) -> str:
    fields = part.model_dump(exclude_none=True)
    return next(iter(fields), "empty")


class AnswerGenerator:
    def __init__(self, client: genai.Client, model_name: str):
        self.client = client
        self.model_name = model_name

    def generate(self, prompt: str) -> List[str]:
        """Generate from a single prompt.

        Every part of the first candidate must carry text; anything else
        (function calls, inline data, ...) aborts with UnexpectedContentPart
        rather than returning a partial answer. A candidate without content or with
        a finish reason other than STOP/MAX_TOKENS (e.g. SAFETY) is a RelayError.
        """
        response = self.client.models.generate_content(model=self.model_name, contents=prompt)

        if not response.candidates:
            raise RelayError("generation returned no candidates")
        candidate = response.candidates[0]
        reason = candidate.finish_reason
        if candidate.content is None or reason not in COMPLETED_FINISH_REASONS:
            reason_name = getattr(reason, "value", reason) or "unknown"
            logger.error(f"Generation blocked | finish_reason={reason_name}")
            raise RelayError(f"generation blocked: finish_reason={reason_name}")
        parts = candidate.content.parts or []

        texts: List[str] = []
        for part in parts:
            if part.text is None:
                kind = _part_kind(part)
                logger.error(f"bad type of part: {kind}")
                raise UnexpectedContentPart(kind)
            texts.append(part.text)
        return texts

    async def generate_async(self, prompt: str) -> List[str]:
        return await asyncio.to_thread(self.generate, prompt)
