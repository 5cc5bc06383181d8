# SPDX-License-Identifier: Apache-2.0
#
# Copyright (c) 2024-2025 DatePick Contributors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""
日志系统配置

提供集中式日志设置，支持文件轮转和控制台输出。
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional, Union

from config.app_config import get_app_dir
from config.constants import (
    DEFAULT_LOG_LINES_TO_READ,
    LOG_ENV_VAR,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_MAX_BYTES,
    LOG_FILE_NAME,
)

ROOT_LOGGER_NAME = "datepick"

# 日志级别映射
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _default_level() -> str:
    env = os.environ.get(LOG_ENV_VAR, "production").lower()
    return "DEBUG" if env == "development" else "INFO"


def setup_logging(
    log_dir: Optional[Union[str, Path]] = None,
    level: Optional[str] = None,
    console_output: bool = True,
) -> logging.Logger:
    """
    设置应用日志系统

    配置文件轮转处理器和控制台处理器。

    Args:
        log_dir: 日志文件目录，默认为 ~/.datepick/logs
        level: 日志级别，默认根据环境变量 DATEPICK_ENV 决定
               (development: DEBUG, production: INFO)
        console_output: 是否输出到控制台，默认 True

    Returns:
        配置好的应用根日志器
    """
    log_dir = Path(log_dir) if log_dir is not None else get_app_dir() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)

    if level is None:
        level = _default_level()
    log_level = LOG_LEVELS.get(level.upper(), logging.INFO)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)  # 由处理器控制级别

    # 清除现有处理器，避免重复
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # 文件处理器 - 详细日志，带轮转
    log_file = log_dir / LOG_FILE_NAME
    file_handler = RotatingFileHandler(
        log_file, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUP_COUNT, encoding="utf-8"
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )
    )
    logger.addHandler(file_handler)

    # 控制台处理器 - 简化日志
    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(max(log_level, logging.INFO))
        console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        logger.addHandler(console_handler)

    logger.info("Logging initialized")
    logger.debug(f"Log file: {log_file}")
    logger.debug(f"Log level: {level}")

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    获取特定模块的日志器实例

    Args:
        name: 模块名称（通常使用 __name__）

    Returns:
        日志器实例
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def get_log_file_path() -> Path:
    """获取当前日志文件路径"""
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    for handler in logger.handlers:
        if isinstance(handler, RotatingFileHandler):
            return Path(handler.baseFilename)

    return get_app_dir() / "logs" / LOG_FILE_NAME


def get_recent_logs(lines: Optional[int] = None) -> List[str]:
    """
    获取最近的日志行

    Args:
        lines: 要读取的行数，默认使用 DEFAULT_LOG_LINES_TO_READ

    Returns:
        日志行列表
    """
    if lines is None:
        lines = DEFAULT_LOG_LINES_TO_READ
    log_file = get_log_file_path()

    if not log_file.exists():
        return []

    with open(log_file, "r", encoding="utf-8") as f:
        return f.readlines()[-lines:]
