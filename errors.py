# errors.py
"""
运行期错误类型。
所有阶段性失败都继承自 GitReportError，由 GitReport.main() 统一转换为退出码。
"""


class GitReportError(Exception):
    """所有报告生成失败的基类"""

    pass


class NotARepository(GitReportError):
    """当前目录不在 Git 仓库内，或 git 不可用"""

    pass


class HistoryQueryFailed(GitReportError):
    """git 历史/详情查询失败，或输出无法按 UTF-8 解码"""

    pass


class CommitNotFound(GitReportError):
    """显式引用在提交列表中没有前缀匹配项"""

    pass


class SelectionAborted(GitReportError):
    """操作者取消了交互式选择"""

    pass


class AIServiceUnreachable(GitReportError):
    """无法连接 Ollama (含超时)"""

    pass


class AIServiceError(GitReportError):
    """Ollama 返回了非成功的 HTTP 状态码"""

    def __init__(self, status_code: int, model: str):
        self.status_code = status_code
        self.model = model
        super().__init__(
            f"Ollama API 请求失败，状态码: {status_code} (模型 '{model}')"
        )


class AIResponseMalformed(GitReportError):
    """Ollama 响应缺少 response 字段或不是合法 JSON"""

    pass


class ReportWriteFailed(GitReportError):
    """报告文件写入失败"""

    pass


class ConfigurationError(GitReportError):
    """本地配置 (如提示词模板) 缺失或不可读"""

    pass
