"""
Opt-in runtime type checking for the outcome package.

Must run before any instrumented module is imported: `beartype.claw` only
decorates modules imported after the hook is registered.
"""

import logging
import os
from collections.abc import Mapping

from beartype import BeartypeConf
from beartype.claw import beartype_all, beartype_package

from .config import BEARTYPE_ALL_ENV, BEARTYPE_THIS_PACKAGE_ENV

logger = logging.getLogger(__name__)


def _flag(environ: Mapping[str, str], name: str) -> bool:
    return environ.get(name, "0") == "1"


def install_runtime_checks(environ: Mapping[str, str] = os.environ) -> None:
    """Registers beartype import hooks according to the `OUTCOME_BEARTYPE_*` flags."""
    if _flag(environ, BEARTYPE_THIS_PACKAGE_ENV):
        logger.debug("beartype enabled for package %s", __package__)
        beartype_package(__package__)
    if _flag(environ, BEARTYPE_ALL_ENV):
        logger.debug("beartype enabled for all packages, violations downgraded to warnings")
        beartype_all(conf=BeartypeConf(violation_type=UserWarning))
