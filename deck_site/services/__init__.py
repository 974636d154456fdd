from .build_service import BuildService
from .favicon import FaviconProvisioner
from .manifest_service import ManifestBuilder, order_by_date
from .metadata_extractor import FrontMatterState, MetadataExtractor
from .verifier import BuildVerifier

__all__ = [
    "BuildService",
    "BuildVerifier",
    "FaviconProvisioner",
    "FrontMatterState",
    "ManifestBuilder",
    "MetadataExtractor",
    "order_by_date",
]
