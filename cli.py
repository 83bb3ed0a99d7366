#!/usr/bin/env python3
"""Nibert Investments site CLI."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

import requests

from nibert_site.client import SiteClient, response_message
from nibert_site.config import ConfigError, load_settings


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nibert-site",
        description="Serve the Nibert Investments site API or call its endpoints.",
    )
    parser.add_argument(
        "--api-url",
        help="Base URL of the API (defaults to NIBERT_API_URL or http://localhost:3001/api).",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the API server.")
    serve_parser.add_argument("--host", help="Bind address (defaults to HOST or 0.0.0.0).")
    serve_parser.add_argument("--port", type=int, help="Port (defaults to PORT or 3001).")
    serve_parser.add_argument(
        "--reload",
        action="store_true",
        help="Reload on code changes (development only).",
    )

    subparsers.add_parser("health", help="Check that the API is up.")

    portfolio_parser = subparsers.add_parser("portfolio", help="List portfolio items.")
    portfolio_parser.add_argument("--id", dest="item_id", help="Show a single item.")

    search_parser = subparsers.add_parser("search", help="Search the portfolio.")
    search_parser.add_argument("query", help="Case-insensitive search text.")
    search_parser.add_argument(
        "--type",
        dest="search_type",
        help="Catalog to search (e.g. 'portfolio'). Omit to search everything.",
    )

    contact_parser = subparsers.add_parser("contact", help="Submit the contact form.")
    contact_parser.add_argument("--name", required=True)
    contact_parser.add_argument("--email", required=True)
    contact_parser.add_argument("--message", required=True)
    contact_parser.add_argument("--subject")

    subparsers.add_parser("contacts", help="List received contact submissions.")
    subparsers.add_parser("company", help="Show company information.")

    return parser


def _format_portfolio_rows(items: List[Dict[str, Any]]) -> str:
    lines = []
    for item in items:
        techs = ", ".join(item.get("technologies") or [])
        lines.append(
            f"{item['id']:>3}  {item['title']:<28} {item.get('status', ''):<12} "
            f"{item.get('year', ''):<5} {techs}"
        )
    return "\n".join(lines)


def _cmd_serve(host: Optional[str], port: Optional[int], reload: bool) -> int:
    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1

    import uvicorn

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    host = host or settings.host
    port = port or settings.port

    from api.main import ENDPOINTS

    print(f"Nibert Investments API server running on port {port}")
    print(f"Environment: {settings.environment}")
    print()
    print("Available endpoints:")
    for method, path, label in ENDPOINTS:
        print(f"  {method:<4} {path:<22} - {label}")

    uvicorn.run(
        "api.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )
    return 0


def _cmd_health(client: SiteClient) -> int:
    body = client.check_health()
    print(f"{body.get('status')}: {body.get('message')} (environment={body.get('environment')})")
    return 0


def _cmd_portfolio(client: SiteClient, item_id: Optional[str]) -> int:
    if item_id is not None:
        body = client.get_portfolio_item(item_id)
        print(_format_portfolio_rows([body["data"]]))
        print(body["data"]["description"])
        return 0

    body = client.get_portfolio()
    print(_format_portfolio_rows(body["data"]))
    print(f"\n{body['count']} item(s)")
    return 0


def _cmd_search(client: SiteClient, query: str, search_type: Optional[str]) -> int:
    body = client.search(query, search_type)
    if not body["data"]:
        print(f"No matches for {query!r}.")
        return 0
    print(_format_portfolio_rows(body["data"]))
    print(f"\n{body['count']} match(es) in {body['searchType']}")
    return 0


def _cmd_contact(client: SiteClient, args: argparse.Namespace) -> int:
    payload = {"name": args.name, "email": args.email, "message": args.message}
    if args.subject:
        payload["subject"] = args.subject
    body = client.submit_contact(payload)
    print(body["message"])
    print(f"Reference: {body['data']['id']} at {body['data']['timestamp']}")
    return 0


def _cmd_contacts(client: SiteClient) -> int:
    body = client.get_contacts()
    for contact in body["data"]:
        print(
            f"- {contact['id']} [{contact['status']}] {contact['name']} <{contact['email']}> "
            f"| {contact['subject']}"
        )
        print(f"    {contact['message']}")
    print(f"\n{body['count']} contact(s)")
    return 0


def _cmd_company(client: SiteClient) -> int:
    body = client.get_company_info()
    print(json.dumps(body["data"], indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "serve":
        return _cmd_serve(args.host, args.port, args.reload)

    client = SiteClient(args.api_url)
    try:
        if args.command == "health":
            return _cmd_health(client)
        if args.command == "portfolio":
            return _cmd_portfolio(client, args.item_id)
        if args.command == "search":
            return _cmd_search(client, args.query, args.search_type)
        if args.command == "contact":
            return _cmd_contact(client, args)
        if args.command == "contacts":
            return _cmd_contacts(client)
        if args.command == "company":
            return _cmd_company(client)
    except requests.HTTPError as exc:
        message = response_message(exc.response) if exc.response is not None else None
        print(f"Request failed: {message or exc}", file=sys.stderr)
        return 1
    except requests.RequestException as exc:
        print(f"Request failed: {exc}", file=sys.stderr)
        return 1

    parser.error(f"Unknown command {args.command}")
    return 2


if __name__ == "__main__":
    sys.exit(main())
