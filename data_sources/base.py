# data_sources/base.py
from abc import ABC, abstractmethod
from typing import List
from models import Commit


class DataSource(ABC):
    """
    数据源抽象基类
    定义了获取提交数据的标准接口，Orchestrator 只依赖这一层。
    """

    @abstractmethod
    def locate(self) -> str:
        """
        确认数据源可用并返回仓库根路径。
        不可用时抛出 NotARepository。
        """
        pass

    @abstractmethod
    def list_recent(self, limit: int) -> List[Commit]:
        """
        获取最近 limit 个提交 (最新在前)。
        """
        pass

    @abstractmethod
    def list_range(self, from_ref: str, to_ref: str) -> List[Commit]:
        """
        获取 from_ref..to_ref 范围内的提交 (最新在前)。
        """
        pass
