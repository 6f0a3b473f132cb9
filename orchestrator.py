# orchestrator.py
"""
业务逻辑编排器
定位仓库 -> 读取最近提交 -> 解析范围 -> 重新查询范围 -> 合成报告 -> 写入文件
"""
import logging
from typing import Optional

from context import RunContext
from data_sources.base import DataSource
from data_sources.local_git import LocalGitDataSource
from range_resolver import Selector, console_selector, resolve_range
from synthesizers.factory import get_synthesizer
import report_builder

logger = logging.getLogger(__name__)


class ReportOrchestrator:
    """
    负责执行报告生成的核心业务流程。
    任何阶段失败都直接抛出 GitReportError，不会写出部分报告。
    """

    def __init__(
        self,
        context: RunContext,
        data_source: Optional[DataSource] = None,
        selector: Optional[Selector] = None,
    ):
        self.context = context
        self.global_config = context.global_config
        self.data_source = data_source or LocalGitDataSource()
        self.selector = selector or console_selector

    def run(self) -> str:
        """
        执行核心业务流程，返回报告文件路径。
        """

        # --- 1. 定位仓库 ---
        repo_path = self.data_source.locate()
        self.context.repo_path = repo_path
        logger.info(f"Repository: {repo_path}")

        # --- 2. 获取最近提交 ---
        commits = self.data_source.list_recent(self.context.limit)
        logger.info(f"Found {len(commits)} commits")

        # --- 3. 解析范围 ---
        from_commit, to_commit = resolve_range(
            commits, self.context.from_ref, self.context.to_ref, self.selector
        )
        logger.info(f"Range: {from_commit.subject} -> {to_commit.subject}")

        # --- 4. 按范围重新查询 ---
        range_commits = self.data_source.list_range(from_commit.hash, to_commit.hash)
        logger.info(f"Found {len(range_commits)} commits in range")

        # --- 5. 合成报告 ---
        synthesizer = get_synthesizer(self.context)
        report_content = synthesizer.synthesize(
            repo_path, from_commit, to_commit, range_commits
        )

        # --- 6. 写入文件 ---
        output_path = self.context.output_path or report_builder.default_output_filename(
            self.context.use_ai, self.global_config
        )
        return report_builder.save_report(report_content, output_path)
