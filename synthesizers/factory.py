# synthesizers/factory.py
import logging

from context import RunContext
from .base import ReportSynthesizer, SYNTHESIZER_REGISTRY

# 导入即注册
from . import plain_synthesizer  # noqa: F401
from . import ollama_synthesizer  # noqa: F401

logger = logging.getLogger(__name__)


def get_synthesizer_id(context: RunContext) -> str:
    return "ollama" if context.use_ai else "plain"


def get_synthesizer(context: RunContext) -> ReportSynthesizer:
    """
    合成器工厂：由 --ai 标志决定使用哪一个实现。
    """
    synthesizer_id = get_synthesizer_id(context)
    if synthesizer_id not in SYNTHESIZER_REGISTRY:
        logger.error(f"❌ 未知的合成器: '{synthesizer_id}'")
        raise ValueError(
            f"未知的合成器: {synthesizer_id} (可用: {list(SYNTHESIZER_REGISTRY.keys())})"
        )

    synthesizer = SYNTHESIZER_REGISTRY[synthesizer_id](context)
    logger.info(f"🔌 [Factory] 使用报告合成器: {synthesizer.name}")
    return synthesizer
