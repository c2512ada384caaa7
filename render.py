from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from config import AppConfig, configure_logging, load_config, resolve_config_path
from core.doclink import create_doc_link_resolver
from core.wikilang import wiki_to_html

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments for the renderer."""

    parser = argparse.ArgumentParser(description="Convert a docwiki page to HTML")
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Wiki page to convert (reads stdin when omitted)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Where to write the HTML (stdout when omitted)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config (defaults to DOCWIKI_CONFIG or docwiki.yaml)",
    )
    return parser.parse_args(argv)


def render_page(body: str, config: AppConfig) -> str:
    resolver = create_doc_link_resolver(config.doc_project_index)
    return wiki_to_html(
        body,
        link_resolver=resolver,
        url_prefix=config.proxy_root,
        wrap_width=config.wrap_width,
    )


def main(argv: Optional[List[str]] = None) -> None:
    load_dotenv(override=False)

    args = _parse_args(argv)
    config_path = resolve_config_path(args.config)
    config = load_config(config_path)
    configure_logging(config.debug_level)

    if args.path:
        body = Path(args.path).read_text(encoding="utf-8")
    else:
        body = sys.stdin.read()

    html = render_page(body, config)

    if args.output:
        output_path = Path(args.output).resolve()
        output_path.write_text(html, encoding="utf-8")
        logger.info("Wrote %s", output_path)
    else:
        sys.stdout.write(html)


if __name__ == "__main__":
    main()
