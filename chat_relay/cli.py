"""CLI entry point for the chat relay."""

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from .api.client import ChatRelay, parse_request
from .config.settings import RelaySettings
from .errors import RelayError
from .observability.logging import configure_logging


async def ask(message: str, history_file: Optional[str] = None, settings: Optional[RelaySettings] = None) -> int:
    """Send one message (after an optional JSON history) and print the reply."""
    settings = settings or RelaySettings.from_env()
    relay = ChatRelay(settings)

    payload = {"message": message}
    if history_file:
        with open(history_file, "r", encoding="utf-8") as fh:
            payload["messages"] = json.load(fh)

    try:
        result = await relay.reply(parse_request(payload))
        print(result.reply)
        return 0
    except RelayError as e:
        print(f"Error ({e.kind}): {e.message}", file=sys.stderr)
        return 1
    finally:
        await relay.aclose()


def serve(host: str, port: int) -> int:
    """Run the HTTP relay with uvicorn."""
    import uvicorn

    from .http.app import create_app

    uvicorn.run(create_app(), host=host, port=port)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI function."""
    parser = argparse.ArgumentParser(description="Chat relay CLI")
    parser.add_argument('--log-level', default='WARNING', help='Logging level (default: WARNING)')
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    ask_parser = subparsers.add_parser('ask', help='Send a message through the relay')
    ask_parser.add_argument('message', help='User message')
    ask_parser.add_argument('--history', help='JSON file with prior [{"sender", "text"}] turns')

    serve_parser = subparsers.add_parser('serve', help='Run the HTTP relay')
    serve_parser.add_argument('--host', default='127.0.0.1')
    serve_parser.add_argument('--port', type=int, default=8000)

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command == 'ask':
        return asyncio.run(ask(args.message, args.history))
    if args.command == 'serve':
        return serve(args.host, args.port)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
