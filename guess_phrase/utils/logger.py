"""
日志工具模块
Logger Utility Module
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Dict, Any


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_log_level(level_str: str) -> int:
    """
    从字符串获取日志级别

    Args:
        level_str: 日志级别字符串（DEBUG, INFO, WARNING, ERROR, CRITICAL）

    Returns:
        int: 日志级别，无法识别时返回INFO
    """
    level_map = {
        'DEBUG': logging.DEBUG,
        'INFO': logging.INFO,
        'WARNING': logging.WARNING,
        'ERROR': logging.ERROR,
        'CRITICAL': logging.CRITICAL
    }
    return level_map.get(str(level_str).upper(), logging.INFO)


def setup_logger(
    name: str = "GTP",
    log_file: Optional[str] = None,
    level: int = logging.INFO,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    设置日志记录器

    同名记录器只配置一次，重复调用直接返回已有实例。

    Args:
        name: 日志记录器名称（组件使用 "GTP.<组件名>"）
        log_file: 日志文件路径（可选）
        level: 日志级别
        format_string: 日志格式字符串（可选）

    Returns:
        logging.Logger: 配置好的日志记录器
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # 避免重复添加处理器
    if logger.handlers:
        return logger

    formatter = logging.Formatter(format_string or LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_path), encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def set_global_level(level_str: str):
    """
    调整所有 GTP 记录器的日志级别

    Args:
        level_str: 日志级别字符串
    """
    level = get_log_level(level_str)
    for name, item in logging.Logger.manager.loggerDict.items():
        if not isinstance(item, logging.Logger):
            continue
        if name == "GTP" or name.startswith("GTP."):
            item.setLevel(level)
            for handler in item.handlers:
                handler.setLevel(level)


def setup_logger_from_config(config: Dict[str, Any], name: str = "GTP") -> logging.Logger:
    """
    从配置字典设置日志

    级别作用于所有 GTP 记录器；日志文件挂在 name 记录器上，
    组件记录器的消息通过向上传递写入该文件。

    Args:
        config: 配置字典（包含level和file键）
        name: 承载文件处理器的记录器名称

    Returns:
        logging.Logger: 承载文件处理器的记录器
    """
    level_str = config.get('level', 'INFO')
    set_global_level(level_str)
    level = get_log_level(level_str)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    log_file = config.get('file')
    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_path), encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    return logger
