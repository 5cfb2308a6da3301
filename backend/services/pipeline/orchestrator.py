"""Pipeline orchestrator: fan out free-text fields to the extractor.

Flow:
    request fields {name: text, ...}
      ├─ extractor.extract(text_1)  → TextSignal   ┐
      ├─ extractor.extract(text_2)  → TextSignal   ├─ concurrent, independent
      └─ extractor.extract(text_n)  → TextSignal   ┘
                       ↓
         {name: TextSignal}  → verdict builder (planning/market/funding/pitch)

The first failing field fails the whole call; no partial results.
"""

import asyncio
import logging
from typing import Protocol

from models.schemas.text_signal import TextSignal

logger = logging.getLogger(__name__)


class SignalExtractor(Protocol):
    async def extract(self, text: str, *, classify: bool = True) -> TextSignal: ...


async def extract_fields(
    extractor: SignalExtractor,
    fields: dict[str, str],
    *,
    classify: bool = True,
) -> dict[str, TextSignal]:
    """Analyze every field concurrently and key the results by field name."""
    keys = list(fields)
    logger.debug("Extracting signals for fields: %s", keys)
    results = await asyncio.gather(
        *(extractor.extract(fields[key], classify=classify) for key in keys)
    )
    return dict(zip(keys, results))
