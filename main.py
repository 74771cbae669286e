#!/usr/bin/env python3

##############################################
#                                            #
#             TOOL GENERATOR                 #
#                                            #
##############################################

import os
from dotenv import load_dotenv
from toolsmith import Toolkit, ToolkitError
from utils.cli import read_tool_request, print_tool

from utils.logger import get_logger, init_logger
logger = get_logger(__name__)


def main() -> None:
    init_logger("config.json")
    load_dotenv()

    toolkit = Toolkit(log_to_console=os.getenv("TOOLKIT_LOG_TO_CONSOLE", "").lower() in {"1", "true", "yes"})
    logger.info("🛠️  Toolkit started. Describe a tool to get started…")

    while True:
        request = None
        try:
            request = read_tool_request()
            if not request:  # Skip empty inputs
                continue

            tool = toolkit.generate_tool({"description": request})
            print_tool(tool)

        except KeyboardInterrupt:
            logger.info("🛠️  Bye!")
            break

        except ToolkitError as exc:
            logger.error("generate_failed", request=request, error=str(exc))

        except Exception as exc:
            logger.exception("generate_failed", request=request, error=str(exc))


if __name__ == "__main__":
    main()
