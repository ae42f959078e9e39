"""Tests for configuration loading."""

import os
import tempfile
from pathlib import Path

from scholia.config import load_config
from scholia.runtime import build_runtime


def test_load_config_defaults():
    """Defaults apply when no file exists."""
    with tempfile.TemporaryDirectory() as tmpdir:
        orig_cwd = os.getcwd()
        try:
            os.chdir(tmpdir)
            config = load_config()
        finally:
            os.chdir(orig_cwd)

    assert config.render.link_target == "_blank"
    assert config.render.link_rel == "noreferrer"
    assert config.render.cache_size == 0
    assert config.serve.port == 8765
    assert config.watch.debounce_ms == 150
    assert config.source is None


def test_load_config_from_file():
    with tempfile.TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "scholia.toml"
        config_path.write_text("""
[render]
link_target = "_self"
link_rel = "nofollow"
cache_size = 64

[serve]
host = "0.0.0.0"
port = 9000

[watch]
debounce_ms = 300
""")

        config = load_config(config_path=config_path)

        assert config.render.link_target == "_self"
        assert config.render.link_rel == "nofollow"
        assert config.render.cache_size == 64
        assert config.serve.host == "0.0.0.0"
        assert config.serve.port == 9000
        assert config.watch.debounce_ms == 300
        assert config.source == config_path


def test_load_config_search_cwd():
    with tempfile.TemporaryDirectory() as tmpdir:
        orig_cwd = os.getcwd()
        try:
            os.chdir(tmpdir)
            Path(tmpdir, "scholia.toml").write_text("""
[serve]
port = 1234
""")
            config = load_config()
            assert config.serve.port == 1234
            assert config.serve.host == "127.0.0.1"
        finally:
            os.chdir(orig_cwd)


def test_build_runtime_uses_config():
    with tempfile.TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "scholia.toml"
        config_path.write_text("""
[render]
link_rel = "ugc"
cache_size = 4
""")
        rt = build_runtime(config_path=config_path)

    assert rt.parser.cache_size == 4
    assert rt.render_html("https://x.co") == (
        '<p><a href="https://x.co" target="_blank" rel="ugc">https://x.co</a></p>'
    )
