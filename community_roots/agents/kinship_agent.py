"""Kinship Agent - shortest path plus kinship term for two people."""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from community_roots.agents.kinship_table import LookupClassifier
from community_roots.agents.llm_client import LLMClient
from community_roots.agents.term_translator import (
    KinshipClassifier,
    LLMClassifier,
    TermTranslator,
    build_query,
)
from community_roots.config import settings
from community_roots.graph.kinship_graph import KinshipGraph
from community_roots.graph.models import PathStep
from community_roots.models import Person

logger = logging.getLogger(__name__)

NO_CONNECTION = "No direct family connection found in the current database."
MISSING_PERSON = "Select two people from the current database."


@dataclass
class KinshipResult:
    """Result from kinship agent."""
    found: bool
    term: Optional[str] = None
    message: Optional[str] = None
    description: Optional[str] = None
    path: list[PathStep] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "found": self.found,
            "term": self.term,
            "message": self.message,
            "description": self.description,
            "path": [step.to_dict() for step in self.path],
        }


def get_classifier(name: Optional[str] = None, llm: Optional[LLMClient] = None) -> KinshipClassifier:
    """Classifier selected by name, defaulting to settings."""
    name = name or settings.kinship.classifier
    if name == "lookup":
        return LookupClassifier()
    if name == "llm":
        return LLMClassifier(llm)
    raise ValueError(f"Unknown kinship classifier: {name}")


class KinshipAgent:
    """
    Kinship Agent - answers "how is B related to A?".

    Flow:
    1. Index the snapshot and check both people exist
    2. Breadth-first search for the shortest path
    3. Ask the term translator for the Hindi kinship term
    """

    def __init__(self, translator: Optional[TermTranslator] = None,
                 max_hops: Optional[int] = None):
        self.translator = translator or TermTranslator(get_classifier())
        self.max_hops = settings.kinship.max_hops if max_hops is None else max_hops

    async def calculate(self, people: Iterable[Person], person1_id: str, person2_id: str) -> KinshipResult:
        graph = KinshipGraph(people)
        person1 = graph.get_person(person1_id)
        person2 = graph.get_person(person2_id)
        if person1 is None or person2 is None:
            return KinshipResult(found=False, message=MISSING_PERSON)

        path = graph.find_path(person1_id, person2_id, max_hops=self.max_hops)
        if path is None:
            logger.info("No connection between %s and %s", person1_id, person2_id)
            return KinshipResult(found=False, message=NO_CONNECTION)

        query = build_query(person1, person2, path, graph.people)
        term = await self.translator.describe_query(query)
        return KinshipResult(
            found=True,
            term=term,
            description=query.description,
            path=path,
        )
