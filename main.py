"""
Entrypoint: load .env and config.yaml, set up logging, render one gist file to stdout
"""

import argparse
import asyncio
import sys
from dataclasses import replace

import structlog
from dotenv import load_dotenv

from gist_snippet.config import Config
from gist_snippet.logging_config import setup_logging
from gist_snippet.snippet import GistSnippet
from gist_snippet.transport import DEFAULT_HOST, GistTransport


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Render a GitHub gist file as a Markdown code block")
    parser.add_argument("gist_id")
    parser.add_argument("file_name")
    parser.add_argument("--config", default=None, help="Path to config.yaml")
    parser.add_argument("--debug", action="store_true", help="Render errors as HTML instead of empty output")
    parser.add_argument("--use-cache", action="store_true")
    parser.add_argument("--hidden-field", action="store_true", help="Append a hidden input carrying the raw content")
    return parser.parse_args(argv)


async def main(argv=None) -> int:
    """Initialize dependencies and render the requested snippet"""
    args = parse_args(argv)

    # Load environment variables from .env file
    load_dotenv()
    config = Config(args.config)

    setup_logging(config.logging.get('level', 'INFO'), config.logging.get('json', True))
    logger = structlog.get_logger(__name__)

    options = config.request_options()
    options = replace(
        options,
        debug=options.debug or args.debug,
        use_cache=options.use_cache or args.use_cache,
        add_hidden_field=options.add_hidden_field or args.hidden_field,
    )

    host = config.transport.get('host', DEFAULT_HOST)
    async with GistTransport(timeout=float(config.transport.get('timeout', 30))) as transport:
        snippet = GistSnippet(transport=transport, host=host)
        result = await snippet.produce(args.gist_id, args.file_name, options)

    if not result:
        logger.error("gist_render_failed", gist_id=args.gist_id, file_name=args.file_name)
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
