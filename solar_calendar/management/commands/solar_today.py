from __future__ import annotations

import json
import logging
from datetime import date

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from solar_calendar.digest import build_daily_digest, render_digest_text

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Print today's date in both calendars"

    def add_arguments(self, parser):
        parser.add_argument("--date", dest="on", help="Gregorian date YYYY-MM-DD (default: today)")
        parser.add_argument("--description", default=None)
        parser.add_argument("--json", action="store_true", help="Emit the digest as JSON")

    def handle(self, *args, **opts):
        if opts["on"]:
            try:
                on = date.fromisoformat(opts["on"])
            except ValueError as exc:
                logger.info("rejected --date %r", opts["on"])
                raise CommandError(f"Invalid date: {opts['on']}") from exc
        else:
            on = timezone.localdate()
        digest = build_daily_digest(
            on, opts["description"], url=getattr(settings, "SOLAR_WEBSITE_URL", None)
        )
        if opts["json"]:
            self.stdout.write(json.dumps(digest, ensure_ascii=False, indent=2))
        else:
            self.stdout.write(render_digest_text(digest))
