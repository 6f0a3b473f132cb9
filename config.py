# config.py
"""
全局配置
- git 命令参数模板
- 输出文件命名
- Ollama 本地服务配置
"""
import logging
import os
from dotenv import load_dotenv

logger = logging.getLogger(__name__)


# --- 脚本基础路径 ---
SCRIPT_BASE_PATH = os.path.abspath(os.path.dirname(__file__))
env_path = os.path.join(SCRIPT_BASE_PATH, ".env")
if os.path.exists(env_path):
    load_dotenv(env_path)
    logger.debug(f"已从脚本目录加载 .env: {env_path}")
else:
    load_dotenv()


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"⚠️ 环境变量 {name}={value!r} 不是整数，使用默认值 {default}")
        return default


class GlobalConfig:
    """
    Git报告的全局应用配置。
    """

    # --- 路径配置 ---
    PROMPTS_DIR_NAME: str = "prompts"

    # --- Git 命令参数 (列表形式，不经过 shell) ---
    GIT_TOPLEVEL_ARGS = ["rev-parse", "--show-toplevel"]
    GIT_LOG_ARGS = ["log", "--pretty=format:%H|%an|%ad|%s", "--date=iso-strict"]
    GIT_BODY_ARGS = ["show", "--no-patch", "--format=%B"]
    GIT_FILES_ARGS = ["show", "--name-only", "--format="]
    GIT_COMMAND_TIMEOUT: int = _env_int("GIT_COMMAND_TIMEOUT", 30)

    # --- 选择范围 ---
    DEFAULT_LIMIT: int = _env_int("GIT_REPORT_LIMIT", 50)

    # --- 文件名 ---
    OUTPUT_FILENAME_PREFIX = "git-report"
    AI_FILENAME_SUFFIX = "-ai"
    OUTPUT_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"

    # =================================================================
    # --- Ollama 配置 ---
    # =================================================================
    OLLAMA_BASE_URL: str = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434").rstrip("/")
    OLLAMA_GENERATE_PATH: str = "/api/generate"
    DEFAULT_MODEL: str = os.getenv("OLLAMA_MODEL", "gemma3")
    OLLAMA_TIMEOUT: int = 120
    OLLAMA_OPTIONS = {
        "temperature": 0.7,
        "top_p": 0.9,
        "max_tokens": 4000,
    }

    @property
    def ollama_generate_url(self) -> str:
        return f"{self.OLLAMA_BASE_URL}{self.OLLAMA_GENERATE_PATH}"
