from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """処理成功時の値"""

    value: T

    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err(Generic[E]):
    """処理失敗時のエラー

    例外を送出せずに、呼び出し側が分岐できる形でエラーを返す。
    """

    error: E

    def is_ok(self) -> bool:
        return False


Result = Union[Ok[T], Err[E]]
