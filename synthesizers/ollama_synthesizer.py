# synthesizers/ollama_synthesizer.py
"""
Ollama 本地大模型报告合成器。
直接调用 Ollama 原生 /api/generate 接口 (非流式)，返回的 response 字段即为报告全文。
"""
import logging
import os
from datetime import datetime
from typing import Any, Dict, Optional, Sequence

import requests

from errors import (
    AIResponseMalformed,
    AIServiceError,
    AIServiceUnreachable,
    ConfigurationError,
)
from models import Commit
import utils
from .base import ReportSynthesizer, register_synthesizer

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
PROMPT_KEY = "report"


def build_commit_dossier(commits: Sequence[Commit]) -> str:
    """把提交列表整理成提示词中的 Commit Data 段落"""
    parts = []
    for i, commit in enumerate(commits, start=1):
        lines = [
            f"Commit {i}:",
            f"  Hash: {commit.hash}",
            f"  Author: {commit.author}",
            f"  Date: {commit.date.strftime(DATE_FORMAT)}",
            f"  Subject: {commit.subject}",
        ]
        if commit.has_description:
            lines.append(f"  Description: {commit.body.strip()}")
        if commit.files_changed:
            lines.append("  Files Changed:")
            lines.extend(f"    - {path}" for path in commit.files_changed)
        parts.append("\n".join(lines) + "\n")
    return "\n".join(parts)


@register_synthesizer("ollama")
class OllamaSynthesizer(ReportSynthesizer):
    """
    Ollama 策略实现。
    单次同步请求，不重试；失败直接终止本次报告生成。
    """

    @property
    def name(self) -> str:
        return f"Ollama ({self.context.model})"

    def _load_prompt_template(self) -> str:
        prompt_path = os.path.join(
            os.path.dirname(os.path.abspath(__file__)),
            self.global_config.PROMPTS_DIR_NAME,
            "ollama",
            f"{PROMPT_KEY}.txt",
        )
        try:
            with open(prompt_path, "r", encoding="utf-8") as f:
                return f.read()
        except OSError as e:
            raise ConfigurationError(f"无法读取提示词模板 {prompt_path}: {e}") from e

    def build_prompt(
        self,
        repo_path: str,
        from_commit: Commit,
        to_commit: Commit,
        commits: Sequence[Commit],
        generated_at: Optional[datetime] = None,
    ) -> str:
        generated_at = generated_at or utils.utc_now()
        return self._load_prompt_template().format(
            repo_path=repo_path,
            from_hash=from_commit.hash,
            to_hash=to_commit.hash,
            total_commits=len(commits),
            generated_at=generated_at.strftime("%Y-%m-%d %H:%M:%S UTC"),
            commit_details=build_commit_dossier(commits),
        )

    def build_payload(self, prompt: str) -> Dict[str, Any]:
        return {
            "model": self.context.model,
            "prompt": prompt,
            "stream": False,
            "options": dict(self.global_config.OLLAMA_OPTIONS),
        }

    def synthesize(
        self,
        repo_path: str,
        from_commit: Commit,
        to_commit: Commit,
        commits: Sequence[Commit],
    ) -> str:
        model = self.context.model
        url = self.global_config.ollama_generate_url
        payload = self.build_payload(
            self.build_prompt(repo_path, from_commit, to_commit, commits)
        )

        logger.info(f"🤖 正在请求 Ollama 生成报告 (模型: {model}, 地址: {url})...")
        try:
            resp = requests.post(
                url, json=payload, timeout=self.global_config.OLLAMA_TIMEOUT
            )
        except (requests.ConnectionError, requests.Timeout) as e:
            raise AIServiceUnreachable(
                f"无法连接 Ollama (模型 '{model}')。请确认 Ollama 正在 {self.global_config.OLLAMA_BASE_URL} 上运行: {e}"
            ) from e
        except requests.RequestException as e:
            raise AIServiceUnreachable(
                f"请求 Ollama 失败 (模型 '{model}', 地址: {url}): {e}"
            ) from e

        if not resp.ok:
            raise AIServiceError(resp.status_code, model)

        try:
            data = resp.json()
        except ValueError as e:
            raise AIResponseMalformed(
                f"无法解析 Ollama 响应 (模型 '{model}'): {e}"
            ) from e

        report = data.get("response") if isinstance(data, dict) else None
        if not isinstance(report, str):
            raise AIResponseMalformed(f"Ollama 响应格式无效 (模型 '{model}')")

        logger.info(f"✅ Ollama 已返回报告 ({len(report)} 字符)")
        return report
