# synthesizers/base.py
"""
所有报告合成器的抽象基类 (ABC)。
通过注册表按 id 选择具体实现 ("plain" / "ollama")。
"""
from abc import ABC, abstractmethod
from typing import Dict, Sequence, Type

from context import RunContext
from models import Commit

# 全局注册表，存储 "synthesizer_id" -> Synthesizer Class 的映射
SYNTHESIZER_REGISTRY: Dict[str, Type["ReportSynthesizer"]] = {}


def register_synthesizer(synthesizer_id: str):
    """
    类装饰器：将具体的合成器注册到全局注册表中。

    使用示例:
        @register_synthesizer("plain")
        class PlainTextSynthesizer(ReportSynthesizer):
            ...
    """

    def decorator(cls):
        if synthesizer_id in SYNTHESIZER_REGISTRY:
            raise ValueError(
                f"Synthesizer id '{synthesizer_id}' 已经被注册过 ({SYNTHESIZER_REGISTRY[synthesizer_id].__name__})"
            )
        SYNTHESIZER_REGISTRY[synthesizer_id] = cls
        return cls

    return decorator


class ReportSynthesizer(ABC):
    """
    报告合成器接口：把解析好的范围和提交列表变成报告文本。
    """

    def __init__(self, context: RunContext):
        self.context = context
        self.global_config = context.global_config

    @property
    @abstractmethod
    def name(self) -> str:
        """合成器名称 (日志显示用)"""
        pass

    @abstractmethod
    def synthesize(
        self,
        repo_path: str,
        from_commit: Commit,
        to_commit: Commit,
        commits: Sequence[Commit],
    ) -> str:
        """返回完整的报告文本"""
        pass
