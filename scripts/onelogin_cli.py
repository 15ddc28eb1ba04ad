"""Command-line helper for querying a OneLogin account.

This module serves as a CLI wrapper around the onelogin SDK services.
"""
from __future__ import annotations
import argparse
import dataclasses
import json
import os
import sys
from collections.abc import Mapping
from pathlib import Path

SCRIPT_DIR = Path(__file__).parent
PROJECT_ROOT = SCRIPT_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from onelogin import OneLoginClient
from onelogin.api.exceptions import ConfigurationError, ResponseShapeError
from onelogin.config import load_settings


def _to_jsonable(value):
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: _to_jsonable(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(item) for item in value]
    if isinstance(value, Mapping):
        return {key: _to_jsonable(item) for key, item in value.items()}
    return value


def _emit(value) -> None:
    print(json.dumps(_to_jsonable(value), indent=2, default=str))


def _fail(cmd: str, client: OneLoginClient) -> None:
    print(f"[{cmd}] Error: {client.error} {client.error_description or ''}".rstrip(), file=sys.stderr)
    sys.exit(1)


def _build_client(args) -> OneLoginClient:
    """Build a client from explicit credentials, else from load_settings()."""
    if args.client_id or args.client_secret:
        if not (args.client_id and args.client_secret):
            raise ConfigurationError("--client-id and --client-secret must be given together")
        return OneLoginClient(args.client_id, args.client_secret, args.region or os.environ.get("ONELOGIN_REGION"))
    config = load_settings()
    if args.region:
        config.region = args.region
    return OneLoginClient.from_config(config)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="OneLogin API helper")
    parser.add_argument("--client-id", help="Defaults to ONELOGIN_CLIENT_ID or /run/secrets/onelogin_client_id")
    parser.add_argument("--client-secret", help="Defaults to ONELOGIN_CLIENT_SECRET or /run/secrets/onelogin_client_secret")
    parser.add_argument("--region", choices=("us", "eu"), help="Defaults to ONELOGIN_REGION, else us")

    sub = parser.add_subparsers(dest="cmd")

    sub.add_parser("token", help="Generate an access token")
    sub.add_parser("rate-limit", help="Show the rate limit of the access token")

    su = sub.add_parser("users")
    su.add_argument("--email")
    su.add_argument("--username")
    su.add_argument("--limit", type=int, default=50)

    sg = sub.add_parser("user")
    sg.add_argument("--id", type=int, required=True)

    sr = sub.add_parser("roles")
    sr.add_argument("--name")
    sr.add_argument("--limit", type=int, default=50)

    sgr = sub.add_parser("groups")
    sgr.add_argument("--limit", type=int, default=50)

    se = sub.add_parser("events")
    se.add_argument("--event-type-id", type=int)
    se.add_argument("--user-id", type=int)
    se.add_argument("--since")
    se.add_argument("--until")
    se.add_argument("--limit", type=int, default=50)

    sub.add_parser("event-types")

    si = sub.add_parser("invite-link")
    si.add_argument("--email", required=True)

    return parser


def main() -> None:
    """Command-line entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.cmd:
        parser.print_help()
        return

    try:
        client = _build_client(args)
    except ConfigurationError as e:
        parser.error(str(e))

    try:
        if args.cmd == "token":
            token = client.get_access_token()
            if token is None:
                _fail(args.cmd, client)
            _emit(token)
        elif args.cmd == "rate-limit":
            rate_limit = client.get_rate_limits()
            if rate_limit is None:
                _fail(args.cmd, client)
            _emit(rate_limit)
        elif args.cmd == "users":
            params = {"limit": args.limit}
            if args.email:
                params["email"] = args.email
            if args.username:
                params["username"] = args.username
            _emit_cursor(args.cmd, client, client.users.get_users(params))
        elif args.cmd == "user":
            user = client.users.get_user(args.id)
            if user is None:
                _fail(args.cmd, client)
            _emit(user)
        elif args.cmd == "roles":
            params = {"limit": args.limit}
            if args.name:
                params["name"] = args.name
            roles = client.roles.get_roles(params)
            if client.error:
                _fail(args.cmd, client)
            _emit(roles)
        elif args.cmd == "groups":
            _emit_cursor(args.cmd, client, client.groups.get_groups({"limit": args.limit}))
        elif args.cmd == "events":
            params = {"limit": args.limit}
            for key in ("event_type_id", "user_id", "since", "until"):
                value = getattr(args, key)
                if value is not None:
                    params[key] = value
            _emit_cursor(args.cmd, client, client.events.get_events(params))
        elif args.cmd == "event-types":
            _emit_cursor(args.cmd, client, client.events.get_event_types())
        elif args.cmd == "invite-link":
            link = client.invites.generate_invite_link(args.email)
            if link is None:
                _fail(args.cmd, client)
            print(link)
        else:
            parser.print_help()
    except ResponseShapeError as e:
        print(f"[{args.cmd}] Unexpected API response: {e}", file=sys.stderr)
        sys.exit(2)


def _emit_cursor(cmd: str, client: OneLoginClient, cursor) -> None:
    if cursor is None:
        _fail(cmd, client)
    records = cursor.take_all()
    if client.error:
        _fail(cmd, client)
    _emit(records)


if __name__ == "__main__":
    main()
