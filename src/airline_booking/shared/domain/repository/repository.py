from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

from ..result import Result

T = TypeVar("T")
ID = TypeVar("ID")


@dataclass(frozen=True)
class PersistenceError:
    """永続化の失敗（接続エラー、制約違反、シリアライズ失敗など）"""

    message: str


class Repository(ABC, Generic[T, ID]):
    """Repository 基底クラス

    - 集約の永続化を抽象化する
    - 永続化の失敗は例外ではなく Err(PersistenceError) として返す
    """

    @abstractmethod
    def save(self, aggregate: T) -> Result[ID, PersistenceError]:
        """集約を永続化し、採番された ID を返す"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        """IDで集約を検索する"""
        raise NotImplementedError
