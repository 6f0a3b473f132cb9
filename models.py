# models.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import Tuple


@dataclass(frozen=True)
class Commit:
    """Git提交数据模型 (只读快照)"""

    hash: str
    author: str
    date: datetime
    subject: str
    body: str = ""
    files_changed: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def short_hash(self) -> str:
        return self.hash[:8]

    @property
    def has_description(self) -> bool:
        return bool(self.body.strip())

    def selection_label(self, ordinal: int) -> str:
        """交互式选择列表中的显示文本"""
        return f"{ordinal}. {self.short_hash} - {self.subject} ({self.date.strftime('%Y-%m-%d')})"
