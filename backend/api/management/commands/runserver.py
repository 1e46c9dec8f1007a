"""``runserver`` listening on the forecast service port by default."""
from __future__ import annotations

import logging

from django.conf import settings
from django.core.management.commands.runserver import Command as RunserverCommand


logger = logging.getLogger(__name__)


class Command(RunserverCommand):
    default_port = settings.FORECAST_PORT

    def inner_run(self, *args, **options):
        logger.info("Server starting on :%s", self.port)
        return super().inner_run(*args, **options)
