"""CommunityRoots - family lineage and kinship resolution."""

__version__ = "0.1.0"
