from __future__ import annotations

import json
import logging
from typing import Any, Callable, Optional, Sequence

from openai import OpenAI

from ..core.constants import UNKNOWN
from ..event_types.model import EventType
from ..logs.model import EventLog
from ..staff.model import Staff

logger = logging.getLogger(__name__)

NO_API_KEY_MESSAGE = "API Key not found. Please ensure the OPENAI_API_KEY environment variable is set."
API_ERROR_MESSAGE = "Failed to generate report due to an API error."
EMPTY_RESPONSE_MESSAGE = "No analysis generated."

PROMPT_TEMPLATE = """You are a professional HR assistant. Please analyze the following event log for a staff member named {name}.

Context:
- Positive values represent "usage" or "burden" (e.g., Sick Leave, Lateness).
- Negative values represent "contribution" or "credit" (e.g., Covering classes).
- A lower total score suggests higher contribution.
- A higher total score suggests higher absence or usage.

Data:
Total Score: {total}
Events:
{events}

Please provide a concise, professional summary of their recent activity. Highlight patterns in their attendance or contributions.
Be constructive. If the score is negative, praise their extra effort. If high positive, suggest support.
"""


def enrich_logs(logs: Sequence[EventLog], event_types: Sequence[EventType]) -> list[dict[str, Any]]:
    names = {t.id: t.name for t in event_types}
    return [
        {
            "date": log.date,
            "type": names.get(log.event_type_id, UNKNOWN),
            "impact": log.value,
            "notes": log.notes,
        }
        for log in logs
    ]


def build_prompt(staff: Staff, logs: Sequence[EventLog], event_types: Sequence[EventType]) -> str:
    enriched = enrich_logs(logs, event_types)
    total = sum(item["impact"] for item in enriched)
    return PROMPT_TEMPLATE.format(name=staff.name, total=total, events=json.dumps(enriched, indent=2))


class StaffSummaryService:
    """Natural-language summary of one staff member's history.

    Never raises: a missing key and API failures come back as fixed messages.
    Single attempt, no retries.
    """

    def __init__(
        self,
        *,
        api_key: str = "",
        model: str = "gpt-4o-mini",
        client_factory: Optional[Callable[[str], Any]] = None,
    ):
        self._api_key = api_key
        self._model = model
        self._client_factory = client_factory or (lambda key: OpenAI(api_key=key))

    def generate(self, staff: Staff, logs: Sequence[EventLog], event_types: Sequence[EventType]) -> str:
        if not self._api_key:
            logger.warning("OpenAI API key not configured, returning placeholder summary")
            return NO_API_KEY_MESSAGE

        prompt = build_prompt(staff, logs, event_types)
        try:
            client = self._client_factory(self._api_key)
            response = client.chat.completions.create(
                model=self._model,
                messages=[{"role": "user", "content": prompt}],
            )
            text = response.choices[0].message.content
        except Exception as e:
            logger.error("LLM API error: %s", e)
            return API_ERROR_MESSAGE

        return text or EMPTY_RESPONSE_MESSAGE
