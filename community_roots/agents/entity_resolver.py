"""
EntityResolver - duplicate detection for newly entered people.

Ranks existing records by name similarity and asks the LLM whether the new
profile matches one of them. Only confident matches are accepted.
"""

import json
import logging
from dataclasses import dataclass
from difflib import SequenceMatcher
from typing import Iterable, Optional

from community_roots.agents.llm_client import LLMClient
from community_roots.models import Person

logger = logging.getLogger(__name__)


@dataclass
class EntityMatch:
    """Best existing record for a new profile."""
    match: Optional[Person]
    confidence: float

    def to_dict(self) -> dict:
        return {
            "matchId": self.match.id if self.match else None,
            "confidence": self.confidence,
        }


NO_MATCH = EntityMatch(match=None, confidence=0)


class EntityResolver:
    """Detects whether a new person duplicates an existing record."""

    def __init__(self, llm: Optional[LLMClient] = None, threshold: float = 70,
                 max_candidates: int = 20):
        """
        Args:
            llm: Client used for the comparison.
            threshold: Minimum confidence (0-100, exclusive) to accept a match.
            max_candidates: Number of existing records sent to the model.
        """
        self.llm = llm or LLMClient()
        self.threshold = threshold
        self.max_candidates = max_candidates

    def _similarity(self, new_name: str, person: Person) -> float:
        return SequenceMatcher(None, new_name.lower(), person.full_name.lower()).ratio()

    def candidates(self, new_person: dict, existing: Iterable[Person]) -> list[Person]:
        """Existing records ordered by name similarity, best first."""
        new_name = " ".join(
            str(new_person[k]) for k in ("firstName", "middleName", "lastName") if new_person.get(k)
        )
        ranked = sorted(existing, key=lambda p: self._similarity(new_name, p), reverse=True)
        return ranked[:self.max_candidates]

    async def resolve(self, new_person: dict, existing: Iterable[Person]) -> EntityMatch:
        """
        Find a duplicate of ``new_person`` among ``existing``.

        Args:
            new_person: Partial profile in camelCase JSON form.
            existing: Current lineage snapshot.

        Returns:
            EntityMatch with the matched record, or no match with confidence 0.
        """
        existing = list(existing)
        candidates = self.candidates(new_person, existing)
        if not candidates:
            return NO_MATCH

        prompt = (
            "Analyze if the following person profile is a duplicate of any existing records.\n"
            f"New Person: {json.dumps(new_person)}\n"
            f"Existing Records: {json.dumps([p.to_json() for p in candidates])}\n\n"
            "Return the match ID and confidence score (0-100) based on Name, DOB, and Locations.\n"
            'Format: {"matchId": "id or null", "confidence": 0}'
        )
        result = await self.llm.extract_json(prompt)
        if not result["success"]:
            logger.warning("Entity resolution failed: %s", result.get("error"))
            return NO_MATCH

        parsed = result["parsed"]
        if not isinstance(parsed, dict):
            return NO_MATCH
        try:
            confidence = float(parsed.get("confidence") or 0)
        except (TypeError, ValueError):
            return NO_MATCH

        match_id = parsed.get("matchId")
        matched = next((p for p in existing if p.id == match_id), None)
        if matched is not None and confidence > self.threshold:
            logger.info("New profile matches %s (%.0f%%)", matched.id, confidence)
            return EntityMatch(match=matched, confidence=confidence)
        return NO_MATCH
