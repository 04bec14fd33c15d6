"""
Seed script for CommunityRoots - writes the sample Sharma family.

Overwrites whatever the configured storage backend currently holds:
    python seed_data.py
"""

import logging

from community_roots.config import configure_logging, settings
from community_roots.storage import get_store
from community_roots.storage.seed import initial_people

logger = logging.getLogger(__name__)


def seed_sample_data():
    """Replace the stored lineage with the bootstrap family."""
    store = get_store()
    people = initial_people()
    store.save(people)
    logger.info("Seeded %d people into the %s store", len(people), settings.storage.backend)
    for person in people:
        logger.info("  %s: %s", person.id, person.full_name)


if __name__ == "__main__":
    configure_logging()
    seed_sample_data()
