"""Test shortest kinship path search."""

import random

import pytest

from community_roots.graph import KinshipGraph, PathStep, Relation, find_path
from community_roots.models import Gender


def all_pairs_distances(people):
    """Floyd-Warshall over the neighbor relation, as an independent reference."""
    graph = KinshipGraph(people)
    ids = [p.id for p in people]
    inf = float("inf")
    dist = {a: {b: (0 if a == b else inf) for b in ids} for a in ids}
    for a in ids:
        for edge in graph.neighbors(a):
            if edge.person_id in dist[a]:
                dist[a][edge.person_id] = 1
    for k in ids:
        for i in ids:
            for j in ids:
                if dist[i][k] + dist[k][j] < dist[i][j]:
                    dist[i][j] = dist[i][k] + dist[k][j]
    return dist


def random_family(person_factory, seed, size=14):
    rng = random.Random(seed)
    people = []
    for i in range(size):
        earlier = [p.id for p in people]
        father = rng.choice(earlier) if earlier and rng.random() < 0.5 else None
        mother = rng.choice(earlier) if earlier and rng.random() < 0.4 else None
        spouse = rng.choice(earlier) if earlier and rng.random() < 0.3 else None
        gender = rng.choice(list(Gender))
        people.append(person_factory(f"p{i}", f"Person{i}", gender, father, mother, spouse))
    return people


class TestEndToEndScenario:
    """A (father), B (mother, spouse of A), C (their son)."""

    def test_father_to_son(self, nuclear_family):
        assert find_path(nuclear_family, "A", "C") == [PathStep("C", Relation.CHILD)]

    def test_mother_to_son(self, nuclear_family):
        assert find_path(nuclear_family, "B", "C") == [PathStep("C", Relation.CHILD)]

    def test_husband_to_wife(self, nuclear_family):
        """Spouse edge found although only B records the link."""
        assert find_path(nuclear_family, "A", "B") == [PathStep("B", Relation.SPOUSE)]

    def test_son_to_mother_follows_enumeration_order(self, nuclear_family):
        """Mother is enumerated before A's spouse edge can be expanded."""
        assert find_path(nuclear_family, "C", "B") == [PathStep("B", Relation.MOTHER)]


class TestFindPath:
    """Tests for find_path."""

    def test_same_person_is_empty_path(self, extended_family):
        for person in extended_family:
            assert find_path(extended_family, person.id, person.id) == []

    def test_unrelated_person_has_no_path(self, extended_family, loner):
        people = extended_family + [loner]
        for person in extended_family:
            assert find_path(people, loner.id, person.id) is None
            assert find_path(people, person.id, loner.id) is None

    def test_missing_ids_resolve_to_no_path(self, extended_family):
        assert find_path(extended_family, "ghost", "c") is None
        assert find_path(extended_family, "c", "ghost") is None

    def test_missing_id_to_itself_is_empty_path(self, extended_family):
        assert find_path(extended_family, "ghost", "ghost") == []

    def test_dangling_reference_is_not_a_destination(self, extended_family):
        """f's mother g2 removed: f still points at her but no path leads there."""
        people = [p for p in extended_family if p.id != "g2"]
        assert find_path(people, "f", "g2") is None

    def test_empty_collection(self):
        assert find_path([], "a", "b") is None

    def test_uncle_through_father(self, extended_family):
        assert find_path(extended_family, "c", "u") == [
            PathStep("f", Relation.FATHER),
            PathStep("u", Relation.SIBLING),
        ]

    def test_cousin_three_hops(self, extended_family):
        assert find_path(extended_family, "c", "cz") == [
            PathStep("f", Relation.FATHER),
            PathStep("u", Relation.SIBLING),
            PathStep("cz", Relation.CHILD),
        ]

    def test_max_hops_limits_depth(self, extended_family):
        assert find_path(extended_family, "c", "cz", max_hops=2) is None
        assert len(find_path(extended_family, "c", "cz", max_hops=3)) == 3

    def test_cyclic_parentage_terminates(self, person_factory):
        """Malformed data where two people are each other's father."""
        people = [
            person_factory("x", "Xavi", Gender.MALE, father="y"),
            person_factory("y", "Yash", Gender.MALE, father="x"),
            person_factory("z", "Zaid", Gender.MALE),
        ]
        assert find_path(people, "x", "y") == [PathStep("y", Relation.FATHER)]
        assert find_path(people, "x", "z") is None

    def test_self_spouse_terminates(self, person_factory):
        people = [person_factory("x", "Xavi", Gender.MALE, spouse="x"),
                  person_factory("y", "Yash", Gender.MALE)]
        assert find_path(people, "x", "y") is None

    def test_deterministic(self, extended_family):
        first = find_path(extended_family, "cz", "mb")
        for _ in range(5):
            assert find_path(extended_family, "cz", "mb") == first

    def test_graph_method_matches_function(self, extended_family):
        graph = KinshipGraph(extended_family)
        assert graph.find_path("s", "a") == find_path(extended_family, "s", "a")

    def test_path_steps_are_valid_edges(self, extended_family):
        graph = KinshipGraph(extended_family)
        path = find_path(extended_family, "mb", "cz")
        current = "mb"
        for step in path:
            assert step in graph.neighbors(current)
            current = step.person_id
        assert current == "cz"


class TestShortestPath:
    """Path length equals the exhaustive shortest distance."""

    def test_extended_family_all_pairs(self, extended_family):
        dist = all_pairs_distances(extended_family)
        for a in dist:
            for b in dist[a]:
                path = find_path(extended_family, a, b)
                if dist[a][b] == float("inf"):
                    assert path is None
                else:
                    assert len(path) == dist[a][b]

    @pytest.mark.parametrize("seed", range(5))
    def test_random_families(self, person_factory, seed):
        people = random_family(person_factory, seed)
        dist = all_pairs_distances(people)
        for a in dist:
            for b in dist[a]:
                path = find_path(people, a, b)
                if dist[a][b] == float("inf"):
                    assert path is None
                else:
                    assert len(path) == dist[a][b]
