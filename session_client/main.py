"""Command line entry point"""

import argparse
import asyncio
import json
import sys
from typing import Any, List, Optional

import httpx

from .api import create_client
from .core import AppError, RequestTimeoutError, load_config
from .models import Session, Message, ProvidersResponse
from .utils import setup_logging, logger


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser"""
    parser = argparse.ArgumentParser(
        prog="session-client",
        description="Talk to the session/message API"
    )
    parser.add_argument("--config", help="Path to YAML configuration file")

    commands = parser.add_subparsers(dest="command", required=True)

    sessions = commands.add_parser("sessions", help="Manage sessions")
    session_commands = sessions.add_subparsers(dest="action", required=True)
    session_commands.add_parser("list", help="List sessions")
    create = session_commands.add_parser("create", help="Create a session")
    create.add_argument("--title")
    create.add_argument("--parent", dest="parent_id")
    delete = session_commands.add_parser("delete", help="Delete a session")
    delete.add_argument("session_id")

    commands.add_parser("providers", help="List providers and models")

    send = commands.add_parser("send", help="Send a message to a session")
    send.add_argument("session_id")
    send.add_argument("--json", dest="payload", required=True, help="Message request as JSON")

    app = commands.add_parser("app", help="Application info and init")
    app.add_argument("action", choices=["info", "init"])

    commands.add_parser("config", help="Show backend configuration")
    return parser


def _print_json(data: Any):
    print(json.dumps(data, indent=2, ensure_ascii=False))


async def run(args: argparse.Namespace) -> int:
    """Execute the parsed command"""
    config = load_config(args.config)
    setup_logging(config.logging.level)

    async with create_client(config) as client:
        if args.command == "sessions":
            if args.action == "list":
                for item in await client.list_sessions():
                    session = Session.model_validate(item)
                    print(f"{session.id}\t{session.title or ''}")
            elif args.action == "create":
                options = {}
                if args.title is not None:
                    options["title"] = args.title
                if args.parent_id is not None:
                    options["parentID"] = args.parent_id
                _print_json(await client.create_session(options))
            else:
                _print_json(await client.delete_session(args.session_id))

        elif args.command == "providers":
            providers = ProvidersResponse.model_validate(await client.get_providers())
            for provider in providers.providers:
                print(provider.get("id", provider.get("name", "")))

        elif args.command == "send":
            payload = json.loads(args.payload)
            if not isinstance(payload, dict):
                raise ValueError("--json must be a JSON object")
            reply = await client.send_message(args.session_id, payload)
            message = Message.model_validate(reply)
            logger.info("Message sent", session_id=args.session_id, message_id=message.id)
            _print_json(reply)

        elif args.command == "app":
            if args.action == "info":
                _print_json(await client.get_app_info())
            else:
                _print_json(await client.initialize_app())

        else:
            _print_json(await client.get_config())

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line client"""
    args = build_parser().parse_args(argv)
    try:
        return asyncio.run(run(args))
    except AppError as e:
        print(f"Error: {e.message} (status {e.status_code})", file=sys.stderr)
    except RequestTimeoutError as e:
        print(f"Error: {e}", file=sys.stderr)
    except httpx.RequestError as e:
        print(f"Error: could not reach backend: {e}", file=sys.stderr)
    except (ValueError, FileNotFoundError) as e:
        # bad --json payload, invalid or missing configuration
        print(f"Error: {e}", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
