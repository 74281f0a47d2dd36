"""Index-build pipeline components."""

from sitesearch.pipeline.config import Config
from sitesearch.pipeline.decode import inflate
from sitesearch.pipeline.documents import build_documents
from sitesearch.pipeline.export import read_jsonl, write_jsonl
from sitesearch.pipeline.feed import ContentFeed
from sitesearch.pipeline.pipeline import IndexPipeline, run_pipeline
from sitesearch.pipeline.sections import slug, split_into_sections

__all__ = [
    # Configuration
    "Config",
    # Pipeline components
    "ContentFeed",
    "IndexPipeline",
    # Functions
    "build_documents",
    "inflate",
    "read_jsonl",
    "run_pipeline",
    "slug",
    "split_into_sections",
    "write_jsonl",
]
