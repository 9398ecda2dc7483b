# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import sys

from pydantic import ValidationError

from authgate.app import create_app
from authgate.shared.config import load_config
from authgate.shared.logging import logger, setup_logging


def main() -> int:
    try:
        config = load_config()
    except ValidationError as exc:
        setup_logging()
        # Field errors name the variable; model-level checks only carry a message.
        problems = "; ".join(
            str(error["loc"][0]) if error.get("loc") else error["msg"]
            for error in exc.errors(include_url=False, include_input=False)
        )
        logger.critical(f"Invalid configuration, refusing to start: {problems}")
        return 1

    setup_logging(config.log_level, debug_mode=config.debug_logging, log_file=config.log_file)
    app = create_app(config)
    logger.info(f"Server running on http://{config.server_host}:{config.server_port}")
    app.run(host=config.server_host, port=config.server_port, debug=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
