"""Entry point for the via-dispatch CLI."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Mapping, Sequence

from via_dispatch.cli import build_registry
from via_dispatch.common import DispatchError
from via_dispatch.config import load_settings
from via_dispatch.observability import setup_logging

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "VIA_DISPATCH_CONFIG"


def main(argv: Sequence[str] | None = None, environ: Mapping[str, str] | None = None) -> int:
    environ = environ if environ is not None else os.environ
    tokens = list(argv) if argv is not None else sys.argv[1:]

    config_path = environ.get(CONFIG_ENV_VAR)
    settings = load_settings(Path(config_path) if config_path else None)
    setup_logging(settings.logging_config, settings.log_level)

    registry = build_registry(settings=settings, environ=environ)

    try:
        return registry.dispatch(tokens)
    except DispatchError as exc:
        logger.error("%s", exc)
        return exc.exit_code
    except OSError as exc:
        logger.error("filesystem error: %s", exc)
        return 1
    except Exception as exc:  # pragma: no cover
        logger.error("command failed: %s", exc)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
