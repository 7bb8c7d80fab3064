"""
Draft Configuration Adapter

Reads draft settings from environment variables, falling back to defaults.
"""

import logging
import os
from typing import Mapping, Optional

from ..application.interfaces import IDraftConfiguration
from ..domain.entities.draft_format import DraftFormat, StartingSide

logger = logging.getLogger(__name__)

DEFAULT_MAX_HISTORY = 50
DEFAULT_DATA_DIR = "data"


class DraftConfigurationAdapter(IDraftConfiguration):
    """
    Configuration adapter backed by environment variables.

    Recognised variables:
        CHAMPION_DRAFT_MAX_HISTORY     undo depth, 0 or negative for unbounded
        CHAMPION_DRAFT_DEFAULT_FORMAT  ranked | competitive
        CHAMPION_DRAFT_DEFAULT_SIDE    a_blue | a_red
        CHAMPION_DRAFT_DATA_DIR        directory for saved drafts
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = os.environ if environ is None else environ

    def get_max_history(self) -> Optional[int]:
        raw = self._environ.get("CHAMPION_DRAFT_MAX_HISTORY")
        if raw is None or not raw.strip():
            return DEFAULT_MAX_HISTORY
        try:
            value = int(raw)
        except ValueError:
            logger.warning(f"Ignoring invalid CHAMPION_DRAFT_MAX_HISTORY={raw!r}")
            return DEFAULT_MAX_HISTORY
        return value if value > 0 else None

    def get_default_format(self) -> DraftFormat:
        raw = self._environ.get("CHAMPION_DRAFT_DEFAULT_FORMAT")
        if not raw:
            return DraftFormat.COMPETITIVE
        try:
            return DraftFormat.parse(raw)
        except ValueError:
            logger.warning(f"Ignoring invalid CHAMPION_DRAFT_DEFAULT_FORMAT={raw!r}")
            return DraftFormat.COMPETITIVE

    def get_default_starting_side(self) -> StartingSide:
        raw = self._environ.get("CHAMPION_DRAFT_DEFAULT_SIDE")
        if not raw:
            return StartingSide.A_BLUE
        try:
            return StartingSide.parse(raw)
        except ValueError:
            logger.warning(f"Ignoring invalid CHAMPION_DRAFT_DEFAULT_SIDE={raw!r}")
            return StartingSide.A_BLUE

    def get_data_dir(self) -> str:
        return self._environ.get("CHAMPION_DRAFT_DATA_DIR") or DEFAULT_DATA_DIR
