"""
Resolve the workload named on the command line into a callable.
"""

import re
import logging
import importlib
from typing import Any, Callable

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# package.module:attr.path
_REFERENCE_RE = re.compile(r"^[A-Za-z_][\w.]*:[A-Za-z_][\w.]*$")


def load_workload(code: str) -> Callable[[], Any]:
    """
    Import the zero-argument callable named by ``code``.

    Args:
        code: Reference of the form "package.module:attr", where attr may
            be a dotted path such as "Class.method"

    Returns:
        The workload callable

    Raises:
        ConfigurationError: If the workload cannot be resolved
    """
    reference = (code or "").strip()
    if not _REFERENCE_RE.match(reference):
        raise ConfigurationError(
            f"Invalid workload '{code}'. Expected 'package.module:function'",
            {"code": code},
        )

    module_name, _, attr_path = reference.partition(":")

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigurationError(
            f"Cannot import module '{module_name}': {e}",
            {"code": reference},
        ) from e

    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError as e:
            raise ConfigurationError(
                f"'{module_name}' has no attribute '{attr_path}'",
                {"code": reference},
            ) from e

    if not callable(target):
        raise ConfigurationError(
            f"'{reference}' is not callable",
            {"code": reference},
        )

    logger.debug(f"Loaded workload {reference}")
    return target
