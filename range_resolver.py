# range_resolver.py
"""
提交范围解析
- 显式引用: 按 hash 前缀匹配 (区分大小写，最新在前，首个命中)
- 未给出引用: 交给选择器交互式挑选
from 与 to 独立解析，不校验先后顺序。
"""
import logging
from typing import Callable, List, Optional, Sequence, Tuple

from errors import CommitNotFound, SelectionAborted
from models import Commit

logger = logging.getLogger(__name__)

# (labels, prompt) -> 选中项下标
Selector = Callable[[Sequence[str], str], int]

FROM_PROMPT = "Select FROM commit (older commit)"
TO_PROMPT = "Select TO commit (newer commit)"


def find_commit(commits: Sequence[Commit], ref: str) -> Commit:
    """按前缀查找提交，找不到时抛出 CommitNotFound"""
    for commit in commits:
        if commit.hash.startswith(ref):
            return commit
    raise CommitNotFound(f"未找到提交 '{ref}'")


def build_selection_labels(commits: Sequence[Commit]) -> List[str]:
    return [commit.selection_label(i + 1) for i, commit in enumerate(commits)]


def select_commit(commits: Sequence[Commit], prompt: str, selector: Selector) -> Commit:
    if not commits:
        raise CommitNotFound("没有可供选择的提交")

    index = selector(build_selection_labels(commits), prompt)
    if not isinstance(index, int) or not 0 <= index < len(commits):
        raise SelectionAborted(f"选择结果无效: {index!r}")
    return commits[index]


def resolve_endpoint(
    commits: Sequence[Commit], ref: Optional[str], prompt: str, selector: Selector
) -> Commit:
    if ref is not None:
        return find_commit(commits, ref)
    return select_commit(commits, prompt, selector)


def resolve_range(
    commits: Sequence[Commit],
    from_ref: Optional[str],
    to_ref: Optional[str],
    selector: Selector,
) -> Tuple[Commit, Commit]:
    """先解析 from，再解析 to"""
    from_commit = resolve_endpoint(commits, from_ref, FROM_PROMPT, selector)
    to_commit = resolve_endpoint(commits, to_ref, TO_PROMPT, selector)

    if from_commit.hash == to_commit.hash:
        logger.warning("⚠️ FROM 与 TO 是同一个提交，报告范围将为空")
    elif from_commit.date > to_commit.date:
        logger.warning("⚠️ FROM 提交晚于 TO 提交，报告范围可能为空")
    return from_commit, to_commit


def console_selector(labels: Sequence[str], prompt: str) -> int:
    """
    终端选择器：打印编号列表，读取 1 起始的编号。
    直接回车选择第一项；输入 q、EOF 或 Ctrl-C 视为取消。
    """
    print(f"\n{prompt}")
    print("Select a commit (commits are shown in chronological order, newest first):\n")
    for label in labels:
        print(f"  {label}")

    while True:
        try:
            choice = input(f"\n请输入编号 (1-{len(labels)}，q 取消) [1]: ").strip()
        except (EOFError, KeyboardInterrupt) as e:
            raise SelectionAborted("已取消选择") from e

        if not choice:
            return 0
        if choice.lower() == "q":
            raise SelectionAborted("已取消选择")
        if choice.isdigit() and 1 <= int(choice) <= len(labels):
            return int(choice) - 1
        print(f"无效输入: {choice}")
