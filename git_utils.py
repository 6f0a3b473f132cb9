# git_utils.py
"""
git 命令行的薄封装与输出解析。
- run_git_command: 唯一的 subprocess 调用点
- run_history_query / run_detail_query: 列表查询与单提交详情查询
- parse_*: 纯文本解析，不依赖 git 进程
"""
import logging
import re
import subprocess
from dataclasses import replace
from datetime import datetime, timezone
from typing import List, Optional, Sequence, Tuple

from config import GlobalConfig
from errors import HistoryQueryFailed, NotARepository
from models import Commit
import utils

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "|"
FIELD_COUNT = 4

# git show 在某些配置下输出的提交头，如 "commit 1a2b3c4d"
_COMMIT_HEADER_RE = re.compile(r"^commit [0-9a-f]{7,64}\b")

# 兼容 --date=iso (非 strict) 的输出格式
_LEGACY_ISO_FORMAT = "%Y-%m-%d %H:%M:%S %z"


def run_git_command(
    args: Sequence[str],
    repo_path: Optional[str],
    description: str = "执行Git命令",
    timeout: int = GlobalConfig.GIT_COMMAND_TIMEOUT,
) -> str:
    """
    统一的Git命令执行函数
    - 参数以列表形式传入，不经过 shell
    - 在 repo_path 下执行 (None 表示当前目录)
    - 任何失败都抛出 HistoryQueryFailed
    """
    cmd = ["git", *args]
    logger.debug(f"在 {repo_path or '当前目录'} 中执行命令: {' '.join(cmd)}")
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            timeout=timeout,
            cwd=repo_path,
        )
    except FileNotFoundError as e:
        raise HistoryQueryFailed(f"{description}失败: 未找到 git 可执行文件") from e
    except subprocess.TimeoutExpired as e:
        raise HistoryQueryFailed(f"{description}超时 ({timeout}s)") from e
    except OSError as e:
        raise HistoryQueryFailed(f"{description}出错: {e}") from e

    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace").strip()
        raise HistoryQueryFailed(
            f"{description}失败 (退出码 {result.returncode}): {stderr}"
        )

    try:
        output = result.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise HistoryQueryFailed(f"{description}失败: 输出不是合法的 UTF-8 文本") from e

    logger.debug(f"{description}成功，输出 {len(output.splitlines())} 行")
    return output


def locate_repository(start_dir: Optional[str] = None) -> str:
    """返回 start_dir (默认当前目录) 所在仓库的根目录"""
    try:
        output = run_git_command(
            GlobalConfig.GIT_TOPLEVEL_ARGS, start_dir, "定位Git仓库"
        )
    except HistoryQueryFailed as e:
        raise NotARepository(f"当前目录不是 Git 仓库: {e}") from e

    repo_path = output.strip()
    if not repo_path:
        raise NotARepository("git 未返回仓库根目录")
    return repo_path


def run_history_query(revision_args: Sequence[str], repo_path: str) -> str:
    """执行提交列表查询 (git log)，revision_args 如 ['-50'] 或 ['a..b']"""
    return run_git_command(
        [*GlobalConfig.GIT_LOG_ARGS, *revision_args], repo_path, "获取Git提交历史"
    )


def run_detail_query(
    commit_hash: str, detail_args: Sequence[str], repo_path: str
) -> str:
    """执行单个提交的详情查询 (git show)"""
    return run_git_command(
        [*detail_args, commit_hash], repo_path, f"获取 {commit_hash[:8]} 的详情"
    )


def parse_commit_date(date_str: str) -> datetime:
    """
    解析 ISO-8601 时间并统一为 UTC。
    解析失败时回退为当前时间 (不丢弃该提交)。
    """
    value = date_str.strip()
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        try:
            parsed = datetime.strptime(value, _LEGACY_ISO_FORMAT)
        except ValueError:
            logger.warning(f"⚠️ 无法解析提交时间 '{date_str}'，使用当前时间代替")
            return utils.utc_now()

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def parse_single_commit(line: str) -> Optional[Commit]:
    """解析单行提交记录 (hash|author|date|subject)，字段不足时返回 None"""
    parts = line.split(FIELD_SEPARATOR, FIELD_COUNT - 1)
    if len(parts) < FIELD_COUNT:
        logger.warning(f"⚠️ 提交格式异常，已跳过: {line!r}")
        return None
    commit_hash, author, date_str, subject = parts
    return Commit(
        hash=commit_hash.strip(),
        author=author,
        date=parse_commit_date(date_str),
        subject=subject,
    )


def parse_git_log(log_output: str) -> List[Commit]:
    """解析Git日志输出 (仅包含头信息，body/files 为空)"""
    commits = []
    if not log_output or not log_output.strip():
        return commits
    for line in log_output.splitlines():
        if not line.strip():
            continue
        commit = parse_single_commit(line)
        if commit:
            commits.append(commit)
    logger.info(f"成功解析 {len(commits)} 个提交")
    return commits


def parse_commit_body(message: str) -> str:
    """完整提交信息去掉首行 (subject) 后的部分"""
    return "\n".join(message.splitlines()[1:])


def parse_changed_files(output: str) -> Tuple[str, ...]:
    """保留 git 的原始顺序，去掉空行和 commit 头残留 (不误伤 commit 开头的文件名)"""
    return tuple(
        line
        for line in output.splitlines()
        if line.strip() and not _COMMIT_HEADER_RE.match(line)
    )


def get_commit_details(commit_hash: str, repo_path: str) -> Tuple[str, Tuple[str, ...]]:
    """获取单个提交的 body 与变更文件列表"""
    message = run_detail_query(commit_hash, GlobalConfig.GIT_BODY_ARGS, repo_path)
    files_output = run_detail_query(commit_hash, GlobalConfig.GIT_FILES_ARGS, repo_path)
    return parse_commit_body(message), parse_changed_files(files_output)


def with_details(commit: Commit, body: str, files_changed: Tuple[str, ...]) -> Commit:
    return replace(commit, body=body, files_changed=files_changed)
