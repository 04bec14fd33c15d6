"""Agents for kinship terms and entity resolution."""

from community_roots.agents.llm_client import LLMClient
from community_roots.agents.term_translator import TermTranslator, UNKNOWN_RELATION
from community_roots.agents.kinship_agent import KinshipAgent, KinshipResult
from community_roots.agents.entity_resolver import EntityResolver, EntityMatch

__all__ = [
    "LLMClient",
    "TermTranslator",
    "UNKNOWN_RELATION",
    "KinshipAgent",
    "KinshipResult",
    "EntityResolver",
    "EntityMatch",
]
