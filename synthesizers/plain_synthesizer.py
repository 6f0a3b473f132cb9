# synthesizers/plain_synthesizer.py
from typing import Sequence

from models import Commit
import report_builder
from .base import ReportSynthesizer, register_synthesizer


@register_synthesizer("plain")
class PlainTextSynthesizer(ReportSynthesizer):
    """确定性的纯文本报告，委托给 report_builder"""

    @property
    def name(self) -> str:
        return "Plain Text"

    def synthesize(
        self,
        repo_path: str,
        from_commit: Commit,
        to_commit: Commit,
        commits: Sequence[Commit],
    ) -> str:
        return report_builder.generate_text_report(
            repo_path, from_commit, to_commit, commits
        )
