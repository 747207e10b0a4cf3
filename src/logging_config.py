"""
Logging configuration for the word search generator.
Console output for the run summary, rotating file for placement diagnostics.
"""
#
# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

import logging
import os
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler

DETAILED_FORMAT = (
    "%(asctime)s - %(levelname)-8s - %(name)s:%(lineno)d - %(funcName)s - %(message)s"
)
CONSOLE_FORMAT = "%(levelname)-8s - %(message)s"


def setup_logging(
    output_dir: str,
    log_level: str = "INFO",
    log_file_prefix: str = "word_search",
    enable_console: bool = True,
) -> str:
    """
    Configure the root logger with a rotating file handler and, optionally,
    a console handler.

    The file handler always records DEBUG so that dropped-word diagnostics
    from the generator end up in the log even when the console is quiet.

    Args:
        output_dir: Directory where the log file is written
        log_level: Console level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file_prefix: Prefix for the timestamped log filename
        enable_console: Whether to attach a stdout handler

    Returns:
        Path to the log file
    """
    os.makedirs(output_dir, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_path = os.path.join(output_dir, f"{log_file_prefix}_{timestamp}.log")

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Re-running setup (tests, repeated CLI calls) must not stack handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=5 * 1024 * 1024,  # 5 MB
        backupCount=3,
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(fmt=DETAILED_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    )
    root_logger.addHandler(file_handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT))
        root_logger.addHandler(console_handler)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging initialized: {log_path}")
    logger.debug(f"Log level: {log_level}, Console: {enable_console}")

    return log_path
