# data_sources/local_git.py
import logging
from typing import Dict, List, Optional

from .base import DataSource
from models import Commit
import git_utils

logger = logging.getLogger(__name__)


class LocalGitDataSource(DataSource):
    """
    本地 Git 数据源实现。
    通过调用 git 命令行工具读取当前仓库。
    """

    def __init__(self, start_dir: Optional[str] = None):
        self.start_dir = start_dir
        self.repo_path: Optional[str] = None
        # 同一次运行内，同一 hash 只构建一次 Commit
        self._commits_by_hash: Dict[str, Commit] = {}

    def locate(self) -> str:
        self.repo_path = git_utils.locate_repository(self.start_dir)
        logger.info(f"✅ [DataSource] 已定位仓库: {self.repo_path}")
        return self.repo_path

    def list_recent(self, limit: int) -> List[Commit]:
        if not isinstance(limit, int) or isinstance(limit, bool) or limit <= 0:
            raise ValueError(f"limit 必须是正整数: {limit!r}")
        return self._read_commits([f"-{limit}"])

    def list_range(self, from_ref: str, to_ref: str) -> List[Commit]:
        return self._read_commits([f"{from_ref}..{to_ref}"])

    def _read_commits(self, revision_args: List[str]) -> List[Commit]:
        repo_path = self.repo_path or self.locate()
        log_output = git_utils.run_history_query(revision_args, repo_path)

        commits = []
        for header in git_utils.parse_git_log(log_output):
            known = self._commits_by_hash.get(header.hash)
            if known is None:
                body, files_changed = git_utils.get_commit_details(
                    header.hash, repo_path
                )
                known = git_utils.with_details(header, body, files_changed)
                self._commits_by_hash[header.hash] = known
            commits.append(known)
        return commits
