"""Tests for kinship lookup and the kinship agent."""

import asyncio

import pytest

from community_roots.agents.kinship_agent import (
    MISSING_PERSON,
    NO_CONNECTION,
    KinshipAgent,
    get_classifier,
)
from community_roots.agents.kinship_table import (
    LookupClassifier,
    UnknownShapeError,
    lookup_term,
    step_word,
)
from community_roots.agents.term_translator import LLMClassifier, TermTranslator, UNKNOWN_RELATION
from community_roots.graph import Relation
from community_roots.models import Gender


def lookup_agent():
    return KinshipAgent(TermTranslator(LookupClassifier()))


class TestLookupTable:
    """Tests for the fixed kinship term table."""

    def test_step_words(self):
        assert step_word(Relation.FATHER, Gender.FEMALE) == "father"
        assert step_word(Relation.CHILD, Gender.FEMALE) == "daughter"
        assert step_word(Relation.SIBLING, Gender.MALE) == "brother"
        assert step_word(Relation.SPOUSE, None) == "spouse"

    def test_paternal_grandmother(self):
        assert lookup_term([Relation.FATHER, Relation.MOTHER], [Gender.MALE, Gender.FEMALE])[0] == "Dadi"

    def test_gender_of_intermediate_matters(self):
        via_son = lookup_term([Relation.CHILD, Relation.CHILD], [Gender.MALE, Gender.MALE])
        via_daughter = lookup_term([Relation.CHILD, Relation.CHILD], [Gender.FEMALE, Gender.MALE])
        assert via_son[0] == "Pota"
        assert via_daughter[0] == "Nati"

    def test_unknown_shape(self):
        with pytest.raises(UnknownShapeError):
            lookup_term([Relation.SPOUSE, Relation.SIBLING, Relation.SPOUSE, Relation.CHILD],
                        [Gender.MALE, Gender.MALE, Gender.FEMALE, Gender.MALE])


class TestKinshipAgent:
    """Tests for KinshipAgent.calculate with the lookup classifier."""

    @pytest.mark.parametrize("start,end,term", [
        ("c", "f", "Pita (father)"),
        ("c", "s", "Behen (sister)"),
        ("s", "c", "Bhai (brother)"),
        ("c", "g2", "Dadi (father's mother)"),
        ("c", "a", "Bua (father's sister)"),
        ("c", "mb", "Mama (mother's brother)"),
        ("c", "ua", "Chachi / Tai (wife of father's brother)"),
        ("c", "cz", "Chachera Bhai (son of father's brother)"),
        ("m", "g1", "Sasur (husband's father)"),
        ("g1", "c", "Pota (son's son)"),
        ("u", "c", "Bhatija (brother's son)"),
    ])
    def test_terms(self, extended_family, start, end, term):
        result = asyncio.run(lookup_agent().calculate(extended_family, start, end))
        assert result.found
        assert result.term == term

    def test_result_carries_path_and_description(self, extended_family):
        result = asyncio.run(lookup_agent().calculate(extended_family, "c", "u"))
        assert [step.person_id for step in result.path] == ["f", "u"]
        assert result.description == "Sohan Verma is the Sibling of Mohan Verma, who is the Father of Arjun Verma"
        assert result.to_dict()["path"] == [
            {"personId": "f", "relation": "Father"},
            {"personId": "u", "relation": "Sibling"},
        ]

    def test_unknown_shape_is_unknown_relation(self, extended_family):
        result = asyncio.run(lookup_agent().calculate(extended_family, "cz", "mb"))
        assert result.found
        assert result.term == UNKNOWN_RELATION

    def test_same_person(self, extended_family):
        result = asyncio.run(lookup_agent().calculate(extended_family, "c", "c"))
        assert result.found
        assert result.term == "Self"
        assert result.path == []

    def test_no_connection(self, extended_family, loner):
        result = asyncio.run(lookup_agent().calculate(extended_family + [loner], "c", "z"))
        assert not result.found
        assert result.message == NO_CONNECTION

    def test_missing_person(self, extended_family):
        result = asyncio.run(lookup_agent().calculate(extended_family, "c", "ghost"))
        assert not result.found
        assert result.message == MISSING_PERSON

    def test_max_hops(self, extended_family):
        agent = KinshipAgent(TermTranslator(LookupClassifier()), max_hops=2)
        result = asyncio.run(agent.calculate(extended_family, "c", "cz"))
        assert result.message == NO_CONNECTION


    def test_chain_built_once(self, extended_family, monkeypatch):
        """The chain description is computed once and shared with the result."""
        from community_roots.agents import term_translator

        calls = []
        original = term_translator.describe_chain

        def counting(*args):
            calls.append(args)
            return original(*args)

        monkeypatch.setattr(term_translator, "describe_chain", counting)
        result = asyncio.run(lookup_agent().calculate(extended_family, "c", "mb"))
        assert len(calls) == 1
        assert result.description == "Vijay Verma is the Sibling of Geeta Verma, who is the Mother of Arjun Verma"


class TestGetClassifier:
    """Tests for classifier selection."""

    def test_lookup(self):
        assert isinstance(get_classifier("lookup"), LookupClassifier)

    def test_llm(self):
        assert isinstance(get_classifier("llm"), LLMClassifier)

    def test_unknown(self):
        with pytest.raises(ValueError):
            get_classifier("oracle")
