"""Runtime wiring helper for the CLI and API."""

from dataclasses import dataclass
from pathlib import Path

from .adapters.html_renderer import HtmlRenderer
from .adapters.markup_parser import MarkupParser
from .config import ScholiaConfig, load_config
from .core.model import Document


@dataclass
class Runtime:
    """Container for all wired components."""
    parser: MarkupParser
    renderer: HtmlRenderer
    config: ScholiaConfig

    def parse(self, text: str) -> Document:
        return self.parser.parse(text)

    def render_html(self, text: str) -> str:
        return self.renderer.render_html(self.parser.parse(text))


def build_runtime(config_path: Path | None = None, config: ScholiaConfig | None = None) -> Runtime:
    """Build and wire all components from configuration."""
    if config is None:
        config = load_config(config_path=config_path)

    parser = MarkupParser(cache_size=config.render.cache_size)
    renderer = HtmlRenderer(
        link_target=config.render.link_target,
        link_rel=config.render.link_rel,
    )
    return Runtime(parser=parser, renderer=renderer, config=config)
