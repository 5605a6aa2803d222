"""OpenAI chat client used to write movie scenes.

Requests use JSON-schema structured output, so the answer is always an object
with the fields the schema requires. Transient failures are retried.
"""

import json
import os
from typing import Any, Dict, Optional

from openai import OpenAI
from tenacity import retry, stop_after_attempt, wait_exponential


DEFAULT_MODEL = "gpt-4o"

# JSON schema for structured outputs
SCENE_SCHEMA = {
    "name": "hmm_scene",
    "strict": True,
    "schema": {
        "type": "object",
        "properties": {
            "image_prompt": {
                "type": "string",
                "description": "2-4 sentence prompt for an image generator (DALL-E, Midjourney, Stable Diffusion), ending with visual style keywords",
            },
            "script": {
                "type": "string",
                "description": "2-3 sentence story of the scene: what the actor does with the props in the room, tied to the meaning",
            },
        },
        "required": ["image_prompt", "script"],
        "additionalProperties": False,
    },
}


class OpenAIClient:
    def __init__(self, model: Optional[str] = None) -> None:
        self.model = model or os.environ.get("OPENAI_MODEL", DEFAULT_MODEL)
        api_key = (os.environ.get("OPENAI_API_KEY") or "").strip()
        if not api_key:
            raise RuntimeError("OPENAI_API_KEY is not set in environment")
        self.client = OpenAI(api_key=api_key, timeout=60.0)

    @retry(reraise=True, stop=stop_after_attempt(4), wait=wait_exponential(multiplier=1, min=1, max=8))
    def complete_structured(
        self,
        system: str,
        user: str,
        schema: Dict[str, Any],
        max_tokens: int = 1024,
    ) -> Any:
        """Complete with structured outputs (JSON schema enforcement)."""
        messages = [
            {"role": "system", "content": system},
            {"role": "user", "content": user},
        ]
        resp = self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            max_completion_tokens=max_tokens,
            response_format={"type": "json_schema", "json_schema": schema},
        )
        text = resp.choices[0].message.content or "{}"
        return json.loads(text)


__all__ = [
    "DEFAULT_MODEL",
    "SCENE_SCHEMA",
    "OpenAIClient",
]
