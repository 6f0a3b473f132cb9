# report_builder.py
"""
报告生成器
- generate_text_report: 纯文本报告 (纯函数，无 I/O)
- default_output_filename / save_report: 输出文件
"""
import logging
import os
from datetime import datetime
from typing import List, Optional, Sequence

from config import GlobalConfig
from errors import ReportWriteFailed
from models import Commit
import utils

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
GENERATED_FORMAT = "%Y-%m-%d %H:%M:%S UTC"


def _trimmed_lines(text: str) -> List[str]:
    """去掉首尾空行后的行列表"""
    lines = text.splitlines()
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


def _commit_block(index: int, commit: Commit) -> List[str]:
    lines = [
        f"{index}. {commit.subject}",
        f"   Hash: {commit.hash}",
        f"   Author: {commit.author}",
        f"   Date: {commit.date.strftime(DATE_FORMAT)}",
    ]
    if commit.has_description:
        lines.append("   Description:")
        lines.extend(f"     {line}" for line in _trimmed_lines(commit.body))
    if commit.files_changed:
        lines.append("   Files Changed:")
        lines.extend(f"     - {path}" for path in commit.files_changed)
    lines.append("")
    return lines


def generate_text_report(
    repo_path: str,
    from_commit: Commit,
    to_commit: Commit,
    commits: Sequence[Commit],
    generated_at: Optional[datetime] = None,
) -> str:
    """
    生成纯文本格式的报告。
    commits 按传入顺序编号 (最新在前)，不重新排序。
    """
    generated_at = generated_at or utils.utc_now()
    lines = [
        "Git Commit Report",
        "================",
        "",
        f"Repository: {repo_path}",
        f"Generated: {generated_at.strftime(GENERATED_FORMAT)}",
        f"Commit Range: {from_commit.hash} -> {to_commit.hash}",
        f"Total Commits: {len(commits)}",
        "",
        "Summary",
        "-------",
        f"From: {from_commit.subject} ({from_commit.hash})",
        f"To: {to_commit.subject} ({to_commit.hash})",
        f"Date Range: {from_commit.date.strftime(DATE_FORMAT)} to {to_commit.date.strftime(DATE_FORMAT)}",
        "",
        "Detailed Commits",
        "================",
        "",
    ]
    for i, commit in enumerate(commits, start=1):
        lines.extend(_commit_block(i, commit))
    return "\n".join(lines) + "\n"


def default_output_filename(
    use_ai: bool, global_config: GlobalConfig, now: Optional[datetime] = None
) -> str:
    """git-report-<时间戳>.txt 或 git-report-ai-<时间戳>.txt"""
    timestamp = (now or utils.utc_now()).strftime(global_config.OUTPUT_TIMESTAMP_FORMAT)
    suffix = global_config.AI_FILENAME_SUFFIX if use_ai else ""
    return f"{global_config.OUTPUT_FILENAME_PREFIX}{suffix}-{timestamp}.txt"


def save_report(content: str, output_path: str) -> str:
    """原样写入报告内容，返回绝对路径"""
    full_path = os.path.abspath(output_path)
    try:
        with open(full_path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        raise ReportWriteFailed(f"保存报告失败 ({full_path}): {e}") from e
    logger.info(f"✅ 报告已保存: {full_path}")
    return full_path
