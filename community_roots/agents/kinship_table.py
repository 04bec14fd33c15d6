"""Deterministic North Indian kinship terms keyed on path shape."""

from typing import Optional

from community_roots.graph.models import Relation
from community_roots.models import Gender


class UnknownShapeError(LookupError):
    """No kinship term is recorded for this path shape."""


def step_word(relation: Relation, gender: Optional[Gender]) -> str:
    """English word for one hop, specialised by the gender of the person reached."""
    if relation is Relation.FATHER:
        return "father"
    if relation is Relation.MOTHER:
        return "mother"
    words = {
        Relation.CHILD: ("son", "daughter", "child"),
        Relation.SIBLING: ("brother", "sister", "sibling"),
        Relation.SPOUSE: ("husband", "wife", "spouse"),
    }[relation]
    if gender is Gender.MALE:
        return words[0]
    if gender is Gender.FEMALE:
        return words[1]
    return words[2]


# (words from the asking person outward) -> (term, explanation)
KINSHIP_TERMS: dict[tuple[str, ...], tuple[str, str]] = {
    # ONE HOP
    ("father",): ("Pita", "father"),
    ("mother",): ("Mata", "mother"),
    ("son",): ("Beta", "son"),
    ("daughter",): ("Beti", "daughter"),
    ("child",): ("Santaan", "child"),
    ("brother",): ("Bhai", "brother"),
    ("sister",): ("Behen", "sister"),
    ("sibling",): ("Sahodar", "sibling"),
    ("husband",): ("Pati", "husband"),
    ("wife",): ("Patni", "wife"),
    ("spouse",): ("Jeevansathi", "spouse"),

    # GRANDPARENTS
    ("father", "father"): ("Dada", "father's father"),
    ("father", "mother"): ("Dadi", "father's mother"),
    ("mother", "father"): ("Nana", "mother's father"),
    ("mother", "mother"): ("Nani", "mother's mother"),
    ("father", "father", "father"): ("Pardada", "father's grandfather"),
    ("father", "father", "mother"): ("Pardadi", "father's grandmother"),
    ("mother", "father", "father"): ("Parnana", "mother's grandfather"),
    ("mother", "father", "mother"): ("Parnani", "mother's grandmother"),

    # PARENTS' SIBLINGS AND THEIR SPOUSES
    ("father", "brother"): ("Chacha / Tau", "father's younger (Chacha) or elder (Tau) brother"),
    ("father", "sister"): ("Bua", "father's sister"),
    ("mother", "brother"): ("Mama", "mother's brother"),
    ("mother", "sister"): ("Mausi", "mother's sister"),
    ("father", "brother", "wife"): ("Chachi / Tai", "wife of father's brother"),
    ("father", "sister", "husband"): ("Phupha", "husband of father's sister"),
    ("mother", "brother", "wife"): ("Mami", "wife of mother's brother"),
    ("mother", "sister", "husband"): ("Mausa", "husband of mother's sister"),

    # COUSINS
    ("father", "brother", "son"): ("Chachera Bhai", "son of father's brother"),
    ("father", "brother", "daughter"): ("Chacheri Behen", "daughter of father's brother"),
    ("father", "sister", "son"): ("Phuphera Bhai", "son of father's sister"),
    ("father", "sister", "daughter"): ("Phupheri Behen", "daughter of father's sister"),
    ("mother", "brother", "son"): ("Mamera Bhai", "son of mother's brother"),
    ("mother", "brother", "daughter"): ("Mameri Behen", "daughter of mother's brother"),
    ("mother", "sister", "son"): ("Mausera Bhai", "son of mother's sister"),
    ("mother", "sister", "daughter"): ("Mauseri Behen", "daughter of mother's sister"),

    # SIBLINGS THROUGH A PARENT
    ("father", "son"): ("Bhai", "son of father"),
    ("father", "daughter"): ("Behen", "daughter of father"),
    ("mother", "son"): ("Bhai", "son of mother"),
    ("mother", "daughter"): ("Behen", "daughter of mother"),

    # DESCENDANTS
    ("son", "son"): ("Pota", "son's son"),
    ("son", "daughter"): ("Poti", "son's daughter"),
    ("daughter", "son"): ("Nati", "daughter's son"),
    ("daughter", "daughter"): ("Natin", "daughter's daughter"),
    ("brother", "son"): ("Bhatija", "brother's son"),
    ("brother", "daughter"): ("Bhatiji", "brother's daughter"),
    ("sister", "son"): ("Bhanja", "sister's son"),
    ("sister", "daughter"): ("Bhanji", "sister's daughter"),
    ("husband", "son"): ("Sautela Beta", "husband's son"),
    ("husband", "daughter"): ("Sauteli Beti", "husband's daughter"),
    ("wife", "son"): ("Sautela Beta", "wife's son"),
    ("wife", "daughter"): ("Sauteli Beti", "wife's daughter"),

    # IN-LAWS
    ("husband", "father"): ("Sasur", "husband's father"),
    ("husband", "mother"): ("Saas", "husband's mother"),
    ("wife", "father"): ("Sasur", "wife's father"),
    ("wife", "mother"): ("Saas", "wife's mother"),
    ("husband", "brother"): ("Devar / Jeth", "husband's younger (Devar) or elder (Jeth) brother"),
    ("husband", "sister"): ("Nanad", "husband's sister"),
    ("wife", "brother"): ("Saala", "wife's brother"),
    ("wife", "sister"): ("Saali", "wife's sister"),
    ("son", "wife"): ("Bahu", "son's wife"),
    ("daughter", "husband"): ("Damaad", "daughter's husband"),
    ("brother", "wife"): ("Bhabhi", "brother's wife"),
    ("sister", "husband"): ("Jija", "sister's husband"),
}


def lookup_term(relations: list[Relation], genders: list[Optional[Gender]]) -> tuple[str, str]:
    """
    Kinship term for a path read from the asking person outward.

    Args:
        relations: Relation of each hop.
        genders: Gender of the person reached at each hop.

    Raises:
        UnknownShapeError: when the shape has no recorded term.
    """
    key = tuple(step_word(r, g) for r, g in zip(relations, genders))
    try:
        return KINSHIP_TERMS[key]
    except KeyError:
        raise UnknownShapeError(" -> ".join(key) or "self") from None


class LookupClassifier:
    """Kinship classifier backed by the fixed term table."""

    async def classify(self, query) -> dict:
        term, explanation = lookup_term(query.relations, query.genders)
        return {"term": term, "explanation": explanation}
