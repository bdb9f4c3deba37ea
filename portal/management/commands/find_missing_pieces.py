"""Resolve the covenant's missing pieces through web search.

Runs one search per missing piece, prints a line per piece and a total line.
Nothing is persisted; repeated runs re-query the search provider.
"""

from __future__ import annotations

import json

from django.core.management.base import BaseCommand, CommandError

from covenant.search import SearchError
from portal.services import build_looking_glass


class Command(BaseCommand):
    """Search for each missing piece and report what was found."""

    help = "Search for each covenant missing piece and report found/missing status."

    def add_arguments(self, parser) -> None:
        """Add command arguments."""

        parser.add_argument(
            "--json",
            action="store_true",
            help="Print the full assembly as JSON instead of the per-piece summary.",
        )
        parser.add_argument(
            "--code",
            action="store_true",
            help="Also print the generated integration code.",
        )

    def handle(self, *args, **options) -> str | None:
        """Run the command."""

        as_json: bool = options["json"]
        with_code: bool = options["code"]

        glass = build_looking_glass()
        try:
            pieces = glass.find_missing_pieces()
        except SearchError as exc:
            raise CommandError(str(exc)) from exc

        result = glass.assemble_pieces(pieces)
        if as_json:
            self.stdout.write(json.dumps(result.as_json(), indent=2, ensure_ascii=False))
        else:
            for piece in pieces:
                label = str(piece.status).upper()
                self.stdout.write(
                    f"[{label}] id={piece.id} category={piece.category} sources={len(piece.sources)} name={piece.name}"
                )
            self.stdout.write(
                f"TOTAL found={len(result.assembled.found_pieces)} missing={len(result.missing)} "
                f"complete={result.complete}"
            )

        if with_code:
            self.stdout.write(glass.generate_integration_code(pieces))
        return None
