"""Seed the notes service with a handful of realistic notes.

Goes through the same client the UI uses, so a successful run also
exercises create and list end to end. Requires the notes service to be
running (python -m notes_server.main).

Usage:
    python scripts/seed_data.py [--base-url http://localhost:3001]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import requests

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from notes_ui.api import NotesApiError, NotesClient  # noqa: E402
from notes_ui.models import NoteDraft  # noqa: E402

DEFAULT_BASE_URL = "http://localhost:3001"

# Each entry: (title, content)
NOTES: list[tuple[str, str]] = [
    (
        "Project Ideas",
        "Build a small CLI that turns meeting transcripts into action items.",
    ),
    (
        "Meeting Notes",
        "Discussed migrating the monolith to services. Decision: start with "
        "the billing module and keep the shared database for now.",
    ),
    (
        "Reading List",
        "Designing Data-Intensive Applications; The Pragmatic Programmer; "
        "Fluent Python.",
    ),
    ("Groceries", "Eggs, milk, bread, coffee beans."),
    (
        "Weekend",
        "Fix the bike brakes, call the plumber about the kitchen sink.",
    ),
]


def check_health(base_url: str) -> bool:
    """Verify the notes service is reachable and healthy."""
    try:
        resp = requests.get(f"{base_url}/health", timeout=10)
        data = resp.json()
        return data.get("status") == "healthy"
    except (requests.RequestException, ValueError) as e:
        print(f"  Health check failed: {e}")
        return False


def seed_notes(client: NotesClient, notes: list[tuple[str, str]] = NOTES) -> int:
    """Create each note, reporting failures per note. Returns how many were created."""
    created = 0
    for i, (title, content) in enumerate(notes, 1):
        try:
            note = client.create_note(NoteDraft(title=title, content=content))
        except NotesApiError as e:
            print(f"  [{i}/{len(notes)}] ERROR: {e.message}")
            continue
        created += 1
        print(f"  [{i}/{len(notes)}] {note.title} -> {note.id}")
    return created


def count_notes(client: NotesClient) -> int | None:
    """Number of notes the service holds, or None if it cannot be listed."""
    try:
        return len(client.list_notes())
    except NotesApiError as e:
        print(f"  ERROR: Could not list notes: {e.message}")
        return None


def main() -> None:
    """Create every seed note, then list what the service holds."""
    parser = argparse.ArgumentParser(description="Seed the notes service")
    parser.add_argument(
        "--base-url",
        default=DEFAULT_BASE_URL,
        help=f"Notes service base URL (default: {DEFAULT_BASE_URL})",
    )
    args = parser.parse_args()
    base_url = args.base_url.rstrip("/")

    print(f"\n  Seeding notes via {base_url}")
    print("  " + "=" * 58)

    if not check_health(base_url):
        print("  FAIL: Notes service is not healthy. Is it running?")
        sys.exit(1)

    client = NotesClient(base_url)
    created = seed_notes(client)
    total = count_notes(client)

    print("  " + "=" * 58)
    if total is None:
        print(f"  Created {created} notes, but the service stopped answering.")
        sys.exit(1)
    print(f"  Done! Created {created} notes; the service now holds {total}.")
    print("  Open the UI: http://localhost:8501")
    print()


if __name__ == "__main__":
    main()
