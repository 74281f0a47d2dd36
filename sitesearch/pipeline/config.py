"""Pipeline and query configuration."""

from dataclasses import dataclass, field
import os
import re
import importlib
from pathlib import Path

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.yaml"


def _expand_env_var(value: str) -> str:
    """Expand environment variables in the form ${VAR:-default}.

    Args:
        value: String possibly containing ${VAR:-default}

    Returns:
        Expanded string with environment variable or default value
    """
    if not isinstance(value, str):
        return value

    # Match ${VAR:-default}, ${VAR-default} or ${VAR}
    pattern = r"\$\{([^:}-]+)(?::?-([^}]*))?\}"

    def replace_env(match):
        var_name = match.group(1)
        default_value = match.group(2) or ""
        return os.environ.get(var_name, default_value)

    return re.sub(pattern, replace_env, value)


def _expand_env(value):
    """Recursively expand env vars in strings inside dicts/lists."""
    if isinstance(value, str):
        return _expand_env_var(value)
    if isinstance(value, dict):
        return {k: _expand_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_expand_env(v) for v in value]
    return value


def _as_int(value, default: int) -> int:
    if value in (None, ""):
        return default
    return int(value)


def _as_float(value, default: float) -> float:
    if value in (None, ""):
        return default
    return float(value)


def _as_bool(value, default: bool) -> bool:
    if value in (None, ""):
        return default
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


@dataclass
class FeedConfig:
    """Content feed configuration."""

    base_url: str = ""
    page_data_path: str = "/page-data"
    api_data_path: str = "/en/next-data/api-data"
    timeout: float = 30.0


@dataclass
class SearchConfig:
    """Hosted search index configuration."""

    endpoint: str = ""
    api_key: str = ""
    heartbeat_interval: float = 3.5
    timeout: float = 10.0


@dataclass
class PipelineConfig:
    """Index-build configuration."""

    output_jsonl: str = "data/search-documents.jsonl"
    workers: int = 1
    include_api_data: bool = False


@dataclass
class PresenterConfig:
    """Result rendering configuration."""

    base_path: str = "/en"
    search_path: str = "/en/search"
    excerpt_chars: int = 125


def resolve_config_path(path: str | None = None) -> Path:
    """Explicit path first, then $SITESEARCH_CONFIG, then the packaged config.yaml."""
    return Path(path or os.environ.get("SITESEARCH_CONFIG") or DEFAULT_CONFIG_PATH)


@dataclass
class Config:
    """Main configuration class."""

    feed: FeedConfig = field(default_factory=FeedConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    pipeline: PipelineConfig = field(default_factory=PipelineConfig)
    presenter: PresenterConfig = field(default_factory=PresenterConfig)

    @classmethod
    def load(cls, path: str | None = None) -> "Config":
        """Load from the resolved YAML file, or from the environment if it is absent."""
        config_path = resolve_config_path(path)
        if config_path.is_file():
            return cls.from_yaml(str(config_path))
        return cls.from_env()

    @classmethod
    def from_yaml(cls, path: str) -> "Config":
        """Load configuration from YAML file."""
        yaml = importlib.import_module("yaml")
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Create config from dictionary."""
        data = _expand_env(data)

        feed_data = data.get("feed") or {}
        search_data = data.get("search") or {}
        pipeline_data = data.get("pipeline") or {}
        presenter_data = data.get("presenter") or {}

        # Unresolved placeholders fall back to the environment
        base_url = feed_data.get("base_url", "")
        if not base_url or "${" in str(base_url):
            base_url = os.environ.get("SITESEARCH_FEED_URL", "")

        endpoint = search_data.get("endpoint", "")
        if not endpoint or "${" in str(endpoint):
            endpoint = os.environ.get("ORAMA_ENDPOINT", "")

        api_key = search_data.get("api_key", "")
        if not api_key or "${" in str(api_key):
            api_key = os.environ.get("ORAMA_API_KEY", "")

        feed = FeedConfig(
            base_url=base_url.rstrip("/"),
            page_data_path=feed_data.get("page_data_path", "/page-data"),
            api_data_path=feed_data.get("api_data_path", "/en/next-data/api-data"),
            timeout=_as_float(feed_data.get("timeout"), 30.0),
        )
        search = SearchConfig(
            endpoint=endpoint.rstrip("/"),
            api_key=api_key,
            heartbeat_interval=_as_float(search_data.get("heartbeat_interval"), 3.5),
            timeout=_as_float(search_data.get("timeout"), 10.0),
        )
        pipeline = PipelineConfig(
            output_jsonl=pipeline_data.get("output_jsonl") or "data/search-documents.jsonl",
            workers=_as_int(pipeline_data.get("workers"), 1),
            include_api_data=_as_bool(pipeline_data.get("include_api_data"), False),
        )
        presenter = PresenterConfig(
            base_path=presenter_data.get("base_path", "/en"),
            search_path=presenter_data.get("search_path", "/en/search"),
            excerpt_chars=_as_int(presenter_data.get("excerpt_chars"), 125),
        )

        if pipeline.workers < 1:
            raise ValueError("pipeline.workers must be at least 1")

        return cls(feed=feed, search=search, pipeline=pipeline, presenter=presenter)

    @classmethod
    def from_env(cls) -> "Config":
        """Load config from environment variables."""
        return cls(
            feed=FeedConfig(
                base_url=os.environ.get("SITESEARCH_FEED_URL", "").rstrip("/"),
            ),
            search=SearchConfig(
                endpoint=os.environ.get("ORAMA_ENDPOINT", "").rstrip("/"),
                api_key=os.environ.get("ORAMA_API_KEY", ""),
            ),
            pipeline=PipelineConfig(
                output_jsonl=os.environ.get("SITESEARCH_OUTPUT", "data/search-documents.jsonl"),
                workers=int(os.environ.get("SITESEARCH_WORKERS", "1")),
            ),
        )
