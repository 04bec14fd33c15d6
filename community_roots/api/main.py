"""FastAPI backend for the shared community lineage."""

import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import Any, List

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from community_roots.agents.entity_resolver import EntityResolver
from community_roots.agents.kinship_agent import KinshipAgent, get_classifier
from community_roots.agents.llm_client import LLMClient
from community_roots.agents.term_translator import TermTranslator
from community_roots.models import Person
from community_roots.storage import LineageStore, StoreError, get_store

logger = logging.getLogger(__name__)


@lru_cache
def get_lineage_store() -> LineageStore:
    return get_store()


@lru_cache
def get_llm_client() -> LLMClient:
    return LLMClient()


@lru_cache
def get_kinship_agent() -> KinshipAgent:
    return KinshipAgent(TermTranslator(get_classifier(llm=get_llm_client())))


@lru_cache
def get_entity_resolver() -> EntityResolver:
    return EntityResolver(llm=get_llm_client())


async def close_dependencies() -> None:
    """Close the shared store and LLM clients and forget them."""
    if get_lineage_store.cache_info().currsize:
        get_lineage_store().close()
    if get_llm_client.cache_info().currsize:
        await get_llm_client().close()
    for dependency in (get_lineage_store, get_llm_client, get_kinship_agent, get_entity_resolver):
        dependency.cache_clear()


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await close_dependencies()


app = FastAPI(title="CommunityRoots API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


class HeritageRequest(BaseModel):
    people: List[Person]


class KinshipRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    person1_id: str
    person2_id: str


class ResolveRequest(BaseModel):
    person: dict[str, Any]


@app.get("/api/heritage")
def load_heritage(store: LineageStore = Depends(get_lineage_store)) -> list[dict]:
    """Whole lineage in camelCase JSON."""
    return [p.to_json() for p in store.load()]


@app.post("/api/heritage")
def save_heritage(request: HeritageRequest, store: LineageStore = Depends(get_lineage_store)) -> dict:
    """Merge the posted people into the lineage by id."""
    try:
        store.upsert(request.people)
    except StoreError as e:
        logger.error("Heritage save failed: %s", e)
        raise HTTPException(status_code=500, detail="Database error")
    return {"success": True}


@app.post("/api/kinship")
async def kinship(
    request: KinshipRequest,
    store: LineageStore = Depends(get_lineage_store),
    agent: KinshipAgent = Depends(get_kinship_agent),
) -> dict:
    """How person2 is related to person1, with the Hindi kinship term."""
    people = store.load()
    result = await agent.calculate(people, request.person1_id, request.person2_id)
    return result.to_dict()


@app.post("/api/resolve")
async def resolve(
    request: ResolveRequest,
    store: LineageStore = Depends(get_lineage_store),
    resolver: EntityResolver = Depends(get_entity_resolver),
) -> dict:
    """Check a new profile against the lineage for duplicates."""
    people = store.load()
    match = await resolver.resolve(request.person, people)
    return match.to_dict()
