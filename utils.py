# utils.py
import logging
import sys
from datetime import datetime, timezone


# 将日志配置移到这里，作为一个可被调用的函数
def setup_logging(level: int = logging.INFO):
    """配置全局日志"""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def utc_now() -> datetime:
    """当前 UTC 时间 (带时区)"""
    return datetime.now(timezone.utc)
