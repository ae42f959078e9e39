"""CLI for scholia - render and edit forum post markup."""

import argparse
import json
import logging
import platform
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .adapters.tree_codec import dump_json, dump_yaml
from .core.model import Selection
from .editor import TOOLBAR_ACTIONS, apply_action, check_selection, wrap_selection
from .format.render import plain_text
from .runtime import build_runtime

logger = logging.getLogger(__name__)


def _read_input(path: str | None) -> str:
    """Read from a file, or stdin when path is None or '-'."""
    if path is None or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def cmd_render(args: argparse.Namespace, rt: Any) -> int:
    """Render post text as HTML, a JSON/YAML tree or plain text."""
    text = _read_input(args.file)
    document = rt.parse(text)

    if args.format == "html":
        print(rt.renderer.render_html(document))
    elif args.format == "json":
        print(dump_json(document))
    elif args.format == "yaml":
        print(dump_yaml(document), end="")
    else:
        print(plain_text(document))
    return 0


def cmd_blocks(args: argparse.Namespace, rt: Any) -> int:
    """Print one line per block: kind and content."""
    text = _read_input(args.file)
    for rb in rt.parse(text).blocks:
        print(f"{rb.kind}\t{rb.block.text}")
    return 0


def cmd_wrap(args: argparse.Namespace, rt: Any) -> int:
    """Wrap a selection with a toolbar action or a custom prefix/suffix."""
    text = _read_input(args.file)
    selection = Selection(args.start, args.end)
    check_selection(text, selection)

    if args.action:
        new_text, new_sel = apply_action(text, selection, args.action)
    else:
        new_text, new_sel = wrap_selection(text, selection, args.prefix, args.suffix)

    print(json.dumps(
        {"text": new_text, "selection": {"start": new_sel.start, "end": new_sel.end}},
        ensure_ascii=False,
    ))
    return 0


def cmd_actions(args: argparse.Namespace, rt: Any) -> int:
    """List toolbar actions."""
    if args.json:
        print(json.dumps([
            {"name": a.name, "title": a.title, "prefix": a.prefix, "suffix": a.suffix}
            for a in TOOLBAR_ACTIONS.values()
        ], indent=2))
        return 0

    for a in TOOLBAR_ACTIONS.values():
        print(f"{a.name}\t{a.prefix!r}\t{a.suffix!r}")
    return 0


def cmd_preview(args: argparse.Namespace, rt: Any) -> int:
    """Watch a draft and re-render it to HTML on each change."""
    from .watch import watch_draft

    draft = Path(args.file)
    out = Path(args.out) if args.out else None

    def on_change(text: str) -> None:
        html = rt.render_html(text)
        if out is None:
            print(html)
            print()
        else:
            out.write_text(html + "\n", encoding="utf-8")
        logger.info("rendered %s (%d chars)", draft, len(text))

    debounce_ms = args.debounce_ms if args.debounce_ms is not None else rt.config.watch.debounce_ms
    watch_draft(draft, on_change, debounce_ms=debounce_ms)
    return 0


def cmd_serve(args: argparse.Namespace, rt: Any) -> int:
    """Start local JSON API server."""
    import uvicorn

    from .api.app import create_app, generate_token

    token_arg = args.token
    if token_arg == "auto":
        token = generate_token()
        print(f"Generated bearer token: {token}")
        print(f"Use in requests: Authorization: Bearer {token}")
    elif token_arg == "none":
        print("Warning: Running without authentication. Only use in trusted environments.")
        token = None
    else:
        token = token_arg

    app = create_app(rt, token=token, enable_cors=args.cors)

    host = args.host if args.host is not None else rt.config.serve.host
    port = args.port if args.port is not None else rt.config.serve.port
    print(f"Starting server on http://{host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level="warning")
    return 0


def _version_string() -> str:
    return (
        f"scholia {__version__}\n"
        f"python {platform.python_version()}\n"
        f"platform {platform.platform()}"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scholia", description="Render and edit forum post markup"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: search cwd/scholia.toml)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--version", action="version", version=_version_string()
    )

    subparsers = parser.add_subparsers(dest="cmd", required=True)

    # render command
    parser_render = subparsers.add_parser("render", help="Render post text")
    parser_render.add_argument("file", nargs="?", help="Input file (default: stdin)")
    parser_render.add_argument(
        "--format", choices=["html", "json", "yaml", "text"], default="html",
        help="Output format (default: html)"
    )

    # blocks command
    parser_blocks = subparsers.add_parser("blocks", help="Show line-level blocks")
    parser_blocks.add_argument("file", nargs="?", help="Input file (default: stdin)")

    # wrap command
    parser_wrap = subparsers.add_parser("wrap", help="Wrap a selection in markup")
    parser_wrap.add_argument("file", nargs="?", help="Input file (default: stdin)")
    parser_wrap.add_argument("--start", type=int, required=True, help="Selection start")
    parser_wrap.add_argument("--end", type=int, required=True, help="Selection end")
    group = parser_wrap.add_mutually_exclusive_group(required=True)
    group.add_argument("--action", choices=list(TOOLBAR_ACTIONS), help="Toolbar action")
    group.add_argument("--prefix", help="Custom prefix")
    parser_wrap.add_argument("--suffix", default="", help="Custom suffix (with --prefix)")

    # actions command
    parser_actions = subparsers.add_parser("actions", help="List toolbar actions")
    parser_actions.add_argument("--json", action="store_true", help="Machine-readable output")

    # preview command
    parser_preview = subparsers.add_parser("preview", help="Re-render a draft on change")
    parser_preview.add_argument("file", help="Draft file to watch")
    parser_preview.add_argument("--out", help="Write HTML here instead of stdout")
    parser_preview.add_argument(
        "--debounce-ms", dest="debounce_ms", type=int, default=None,
        help="Debounce interval (default: from config, 150)"
    )

    # serve command
    parser_serve = subparsers.add_parser("serve", help="Start local JSON API server")
    parser_serve.add_argument(
        "--host", default=None,
        help="Host to bind to (default: from config, 127.0.0.1)"
    )
    parser_serve.add_argument(
        "--port", type=int, default=None,
        help="Port to bind to (default: from config, 8765)"
    )
    parser_serve.add_argument(
        "--token", default="auto",
        help="Bearer token (auto|<string>|none, default: auto)"
    )
    parser_serve.add_argument(
        "--cors", action="store_true",
        help="Enable CORS (default: false)"
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    rt = build_runtime(config_path=args.config)

    handlers = {
        "render": cmd_render,
        "blocks": cmd_blocks,
        "wrap": cmd_wrap,
        "actions": cmd_actions,
        "preview": cmd_preview,
        "serve": cmd_serve,
    }

    handler = handlers.get(args.cmd)
    if handler:
        try:
            exit_code = handler(args, rt)
            sys.exit(exit_code)
        except Exception as e:
            logger.debug("command %s failed", args.cmd, exc_info=True)
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        print(f"Unknown command: {args.cmd}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
