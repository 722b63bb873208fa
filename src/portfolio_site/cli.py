"""Operator command line for the portfolio site.

Commands:
    serve     Run the API with uvicorn.
    seed      Replace the profile with sample data or a JSON file.
    check-db  Verify the database connection and print record counts.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from portfolio_site.data.db import get_database_url, get_session, init_db
from portfolio_site.data.models import Achievement, Message, Project
from portfolio_site.errors import ContentValidationError
from portfolio_site.models import ProfileDocument
from portfolio_site.services.documents import build_document
from portfolio_site.services.profile import clear_profile, get_profile, upsert_profile

SAMPLE_PROFILE: dict[str, Any] = {
    "name": "Alex Morgan",
    "title": "Full Stack Developer",
    "university": "State University of Technology",
    "bio": "Full stack developer who enjoys building scalable web applications.",
    "email": "alex.morgan@example.com",
    "phone": "+1 555 0100",
    "location": "Springfield",
    "github": "https://github.com/example",
    "linkedin": "https://www.linkedin.com/in/example",
    "themeColor": "#fa0025",
    "education": [
        {
            "institution": "State University of Technology",
            "degree": "BSc in Computer Science and Engineering",
            "startDate": "2022",
            "endDate": "2027",
        }
    ],
    "experience": [
        {
            "company": "Example Labs",
            "role": "Full Stack Developer",
            "duration": "6 months",
            "description": "Building and deploying production web sites.",
        }
    ],
    "skills": [
        {"name": "Node.js", "category": "Backend"},
        {"name": "Next.js", "category": "Frontend"},
        {"name": "GitHub", "category": "Tools"},
    ],
}


def _load_profile_file(path: Path) -> dict[str, Any]:
    with path.open(encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object")
    return data


def seed_profile(payload: dict[str, Any]) -> dict[str, Any]:
    """Replace any existing profile with ``payload``.

    The payload is validated before the current profile is removed.
    """
    build_document(ProfileDocument, payload)
    init_db()
    clear_profile()
    return upsert_profile(payload)


def run_seed(args: argparse.Namespace) -> int:
    try:
        payload = _load_profile_file(args.file) if args.file else SAMPLE_PROFILE
    except (OSError, ValueError) as exc:
        print(f"❌ Could not read profile file: {exc}")
        return 1

    try:
        profile = seed_profile(payload)
    except ContentValidationError as exc:
        print(f"❌ {exc.message}")
        return 1

    print(f"✅ Profile restored for {profile['name']}")
    return 0


def run_check_db(args: argparse.Namespace) -> int:
    print(f"Connecting to: {get_database_url()}")
    try:
        init_db()
        with get_session() as session:
            counts = {
                "projects": session.scalar(select(func.count()).select_from(Project)),
                "achievements": session.scalar(select(func.count()).select_from(Achievement)),
                "messages": session.scalar(select(func.count()).select_from(Message)),
            }
        profile = get_profile()
    except SQLAlchemyError as exc:
        print(f"❌ Database error: {exc}")
        return 1

    print("✅ Connected!")
    print(f"Profile found: {'Yes' if profile else 'No'}")
    for name, count in counts.items():
        print(f"  {name}: {count}")
    return 0


def run_serve(args: argparse.Namespace) -> int:
    from portfolio_site.api.main import main as serve

    serve(host=args.host, port=args.port, reload=args.reload)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="portfolio-site", description=__doc__.splitlines()[0])
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the API server")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)
    serve.add_argument("--reload", action="store_true")
    serve.set_defaults(handler=run_serve)

    seed = subparsers.add_parser("seed", help="Replace the profile with seed data")
    seed.add_argument("--file", type=Path, default=None, help="JSON file with profile fields")
    seed.set_defaults(handler=run_seed)

    check = subparsers.add_parser("check-db", help="Check the database connection")
    check.set_defaults(handler=run_check_db)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the CLI application."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.handler(args)
    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user. Exiting.")
        return 130
    except Exception as exc:
        print(f"\n❌ Unexpected error: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
