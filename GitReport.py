# GitReport.py
"""
Git 提交范围报告生成器
  - cli.py: 负责命令行界面和配置组装
  - context.py: 负责运行时配置模型
  - orchestrator.py: 负责核心业务流程
  - GitReport.py: 仅作为主入口启动器
"""

import logging
import sys
from typing import List, Optional

# 1. 初始化日志 (必须在所有模块导入之前完成)
import utils

utils.setup_logging()

from errors import GitReportError  # noqa: E402

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """控制台脚本入口，返回进程退出码"""
    try:
        # 延迟导入 cli 模块，确保日志已配置
        import cli

        cli.run_cli(argv)
        return 0

    except GitReportError as e:
        logger.error(f"❌ {e}")
        return 1
    except KeyboardInterrupt:
        logger.error("❌ 已中断")
        return 130
    except Exception as e:
        # 捕获所有未处理的全局异常
        logger.error(f"❌ 发生未处理的全局异常: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
