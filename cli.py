# cli.py
"""
命令行界面 (Interface) 层
负责 argparse 定义和 RunContext 组装，然后移交给 Orchestrator。
"""
import argparse
import logging
from typing import List, Optional

from config import GlobalConfig
from context import RunContext
from orchestrator import ReportOrchestrator

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"不是整数: {value}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"必须是正整数: {value}")
    return number


def setup_parser(global_config: Optional[GlobalConfig] = None) -> argparse.ArgumentParser:
    """
    负责所有 argparse 的定义。
    """
    global_config = global_config or GlobalConfig()
    parser = argparse.ArgumentParser(
        prog="git-report",
        description="Generate detailed commit reports from git repository",
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="输出文件路径\n(默认: git-report-<时间戳>.txt / git-report-ai-<时间戳>.txt)",
    )
    parser.add_argument(
        "-f",
        "--from",
        dest="from_ref",
        type=str,
        default=None,
        help="FROM 提交的 hash 或前缀 (省略则交互式选择)",
    )
    parser.add_argument(
        "-t",
        "--to",
        dest="to_ref",
        type=str,
        default=None,
        help="TO 提交的 hash 或前缀 (省略则交互式选择)",
    )
    parser.add_argument(
        "-l",
        "--limit",
        type=_positive_int,
        default=global_config.DEFAULT_LIMIT,
        help=f"可供选择的最近提交数量 (默认: {global_config.DEFAULT_LIMIT})",
    )

    # --- AI 参数 ---
    parser.add_argument(
        "--ai",
        action="store_true",
        help="使用本地 Ollama 生成 AI 增强报告",
    )
    parser.add_argument(
        "--model",
        type=str,
        default=global_config.DEFAULT_MODEL,
        help=f"Ollama 模型名称 (默认: {global_config.DEFAULT_MODEL})",
    )

    return parser


def build_context(args: argparse.Namespace, global_config: GlobalConfig) -> RunContext:
    return RunContext(
        from_ref=args.from_ref,
        to_ref=args.to_ref,
        limit=args.limit,
        use_ai=args.ai,
        model=args.model,
        output_path=args.output,
        global_config=global_config,
    )


def run_cli(argv: Optional[List[str]] = None, orchestrator_cls=ReportOrchestrator) -> str:
    """
    主入口点，返回写出的报告路径。
    """
    global_config = GlobalConfig()
    parser = setup_parser(global_config)
    args = parser.parse_args(argv)

    run_context = build_context(args, global_config)

    logger.info("=" * 50)
    logger.info("🚀 Git Report Generator 启动...")
    logger.info(f"   [选择范围]: 最近 {run_context.limit} 个提交")
    if run_context.use_ai:
        logger.info(f"   [报告模式]: AI (Ollama, 模型 {run_context.model})")
    else:
        logger.info("   [报告模式]: 纯文本")
    logger.info("=" * 50)

    orchestrator = orchestrator_cls(run_context)
    output_file = orchestrator.run()
    logger.info(f"Report saved to: {output_file}")
    return output_file
