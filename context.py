# context.py
"""
运行时配置的数据模型
"""
from dataclasses import dataclass
from typing import Optional
from config import GlobalConfig


@dataclass
class RunContext:
    """
    封装一次运行所需的所有配置和状态。
    这是从 CLI 传递到 Orchestrator 的唯一对象。
    """

    # --- 范围参数 ---
    from_ref: Optional[str]
    to_ref: Optional[str]
    limit: int

    # --- AI 参数 ---
    use_ai: bool
    model: str

    # --- 输出 ---
    output_path: Optional[str]

    # --- 全局配置 ---
    # 包含所有 git 命令模板、Ollama 地址和 .env 加载的数据
    global_config: GlobalConfig

    # --- 核心路径 ---
    # 由 Orchestrator 在定位仓库后填入
    repo_path: Optional[str] = None
