"""JSON log output for stdlib loggers."""

from __future__ import annotations

import io
import json
import logging

import structlog
from django.conf import settings
from django.test import SimpleTestCase


class JsonLoggingTests(SimpleTestCase):
    def setUp(self) -> None:
        config = settings.LOGGING["formatters"]["json"]
        self.stream = io.StringIO()
        handler = logging.StreamHandler(self.stream)
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=config["processor"],
                foreign_pre_chain=config["foreign_pre_chain"],
            )
        )
        self.logger = logging.getLogger("apps.favorites.views")
        self.logger.addHandler(handler)
        self.addCleanup(self.logger.removeHandler, handler)

    def last_entry(self) -> dict:
        return json.loads(self.stream.getvalue().strip().splitlines()[-1])

    def test_extra_fields_and_level_are_rendered(self) -> None:
        self.logger.warning("Favorite added", extra={"user_id": 7, "property_id": 9})

        entry = self.last_entry()
        self.assertEqual(entry["event"], "Favorite added")
        self.assertEqual(entry["level"], "warning")
        self.assertEqual(entry["logger"], "apps.favorites.views")
        self.assertEqual(entry["user_id"], 7)
        self.assertEqual(entry["property_id"], 9)
        self.assertIn("timestamp", entry)
