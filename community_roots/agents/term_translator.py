"""
Term Translator - turns a kinship path into a Hindi kinship term.

Builds the relationship chain for a resolved path and asks a classifier
(LLM or fixed table) for the North Indian term. The classifier is treated
as unreliable: any failure yields ``UNKNOWN_RELATION``.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Protocol

from community_roots.agents.llm_client import LLMClient
from community_roots.config import settings
from community_roots.graph.models import PathStep, Relation
from community_roots.models import Gender, Person

logger = logging.getLogger(__name__)

UNKNOWN_RELATION = "Unknown Relation"
UNKNOWN_PERSON = "Unknown Person"
SELF_TERM = "Self"

KINSHIP_SYSTEM_PROMPT = "You are an expert in Indian genealogy and kinship terms."


@dataclass
class KinshipQuery:
    """Everything a classifier may use to name a relationship."""
    prompt: str
    start_name: str
    start_gender: Gender
    end_name: str
    end_gender: Gender
    description: str
    relations: list[Relation] = field(default_factory=list)
    genders: list[Optional[Gender]] = field(default_factory=list)  # person reached at each hop


class KinshipClassifier(Protocol):
    async def classify(self, query: KinshipQuery) -> dict:
        ...


class LLMClassifier:
    """Kinship classifier that asks a language model."""

    def __init__(self, llm: Optional[LLMClient] = None):
        self.llm = llm or LLMClient()

    async def classify(self, query: KinshipQuery) -> dict:
        prompt = (
            f'Given a family relationship path: "{query.prompt}", '
            "identify the specific North Indian (Hindi-based) kinship term "
            "(e.g., Chacha, Tau, Mama, Bua, Nanad, etc.). "
            "Explain briefly why it's used.\n\n"
            'Format: {"term": "Hindi term", "explanation": "short reason"}'
        )
        result = await self.llm.extract_json(prompt, system=KINSHIP_SYSTEM_PROMPT)
        if not result["success"]:
            raise RuntimeError(result.get("error", "LLM call failed"))
        return result["parsed"]


def describe_chain(start: Person, path: list[PathStep], people: Iterable[Person]) -> str:
    """
    Natural-language chain for a path, read from the far end back to ``start``.

    ``[(A, Father), (B, Spouse)]`` from C reads
    "B is the Spouse of A, who is the Father of C".
    """
    by_id: dict[str, Person] = {}
    for person in people:
        by_id.setdefault(person.id, person)

    names = [start.full_name]
    for step in path:
        person = by_id.get(step.person_id)
        names.append(person.full_name if person else UNKNOWN_PERSON)

    if not path:
        return names[0]

    clauses = []
    for i in range(len(path), 0, -1):
        relation = path[i - 1].relation.value
        if not clauses:
            clauses.append(f"{names[i]} is the {relation} of {names[i - 1]}")
        else:
            clauses.append(f"who is the {relation} of {names[i - 1]}")
    return ", ".join(clauses)


def build_query(
    start: Person, end: Person, path: list[PathStep], people: Iterable[Person]
) -> KinshipQuery:
    people = list(people)
    genders = {p.id: p.gender for p in reversed(people)}
    description = describe_chain(start, path, people)
    prompt = (
        f"Target relationship: How is {end.full_name} ({end.gender.value}) related to "
        f"{start.full_name} ({start.gender.value})? Path: {description}. "
        f"Please provide the specific Indian (Hindi) kinship term from the perspective "
        f"of {start.full_name}."
    )
    return KinshipQuery(
        prompt=prompt,
        start_name=start.full_name,
        start_gender=start.gender,
        end_name=end.full_name,
        end_gender=end.gender,
        description=description,
        relations=[step.relation for step in path],
        genders=[genders.get(step.person_id) for step in path],
    )


def format_term(result) -> str:
    """Display string for a classifier result, or the sentinel when malformed."""
    if not isinstance(result, dict):
        return UNKNOWN_RELATION
    term = result.get("term")
    if not isinstance(term, str) or not term.strip():
        return UNKNOWN_RELATION
    explanation = result.get("explanation")
    if isinstance(explanation, str) and explanation.strip():
        return f"{term.strip()} ({explanation.strip()})"
    return term.strip()


class TermTranslator:
    """Resolve a kinship path to a display term through one classifier call."""

    def __init__(self, classifier: KinshipClassifier, timeout: Optional[float] = None):
        self.classifier = classifier
        self.timeout = settings.kinship.timeout_seconds if timeout is None else timeout

    async def describe(
        self,
        start: Person,
        end: Person,
        path: list[PathStep],
        people: Iterable[Person] = (),
    ) -> str:
        """
        Kinship term for how ``end`` is related to ``start``.

        Args:
            start: The person asking.
            end: The person being described.
            path: Steps from ``start`` to ``end`` (from find_path).
            people: Snapshot used to name intermediate people.

        Returns:
            "<term> (<explanation>)", "Self" for an empty path, or
            "Unknown Relation" when the classifier fails.
        """
        if not path:
            return SELF_TERM

        return await self.describe_query(build_query(start, end, path, people))

    async def describe_query(self, query: KinshipQuery) -> str:
        """Classify a prepared query; "Self" when it has no hops."""
        if not query.relations:
            return SELF_TERM
        try:
            result = await asyncio.wait_for(self.classifier.classify(query), self.timeout)
        except asyncio.TimeoutError:
            logger.warning("Kinship classifier timed out after %ss", self.timeout)
            return UNKNOWN_RELATION
        except Exception as e:
            logger.warning("Kinship classifier failed for %r: %s", query.description, e)
            return UNKNOWN_RELATION

        term = format_term(result)
        if term == UNKNOWN_RELATION:
            logger.warning("Kinship classifier returned malformed result: %r", result)
        return term
