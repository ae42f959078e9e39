"""Configuration loader for scholia.toml."""

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_NAME = "scholia.toml"


@dataclass
class RenderConfig:
    """HTML rendering and parse caching."""
    link_target: str = "_blank"
    link_rel: str = "noreferrer"
    cache_size: int = 0


@dataclass
class ServeConfig:
    """Local JSON API server."""
    host: str = "127.0.0.1"
    port: int = 8765


@dataclass
class WatchConfig:
    """Draft preview watcher."""
    debounce_ms: int = 150


@dataclass
class ScholiaConfig:
    """Complete scholia configuration."""
    render: RenderConfig = field(default_factory=RenderConfig)
    serve: ServeConfig = field(default_factory=ServeConfig)
    watch: WatchConfig = field(default_factory=WatchConfig)
    source: Path | None = None


def load_config(config_path: Path | None = None) -> ScholiaConfig:
    """
    Load configuration from scholia.toml.

    Search order:
    1. config_path (if provided)
    2. cwd/scholia.toml

    A missing file means defaults for every section.
    """
    toml_data: dict[str, Any] = {}
    source = None

    search_paths = []
    if config_path:
        search_paths.append(config_path)
    search_paths.append(Path.cwd() / CONFIG_NAME)

    for path in search_paths:
        if path.exists():
            with open(path, "rb") as f:
                toml_data = tomllib.load(f)
            source = path
            logger.debug("loaded config from %s", path)
            break
    else:
        if config_path:
            logger.warning("config file %s not found, using defaults", config_path)

    render_data = toml_data.get("render", {})
    render_config = RenderConfig(
        link_target=render_data.get("link_target", "_blank"),
        link_rel=render_data.get("link_rel", "noreferrer"),
        cache_size=int(render_data.get("cache_size", 0)),
    )

    serve_data = toml_data.get("serve", {})
    serve_config = ServeConfig(
        host=serve_data.get("host", "127.0.0.1"),
        port=int(serve_data.get("port", 8765)),
    )

    watch_data = toml_data.get("watch", {})
    watch_config = WatchConfig(
        debounce_ms=int(watch_data.get("debounce_ms", 150)),
    )

    return ScholiaConfig(
        render=render_config,
        serve=serve_config,
        watch=watch_config,
        source=source,
    )
