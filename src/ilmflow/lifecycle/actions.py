"""生命周期动作定义模块.

提供内置动作名称枚举 ActionName 与动作数据模型 LifecycleAction。
动作参数对本模块不透明，仅由外部执行器解释。
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .exceptions import PolicyValidationError


class ActionName(str, Enum):
    """内置生命周期动作名称."""

    ROLLOVER = "rollover"
    ALLOCATE = "allocate"
    REPLICAS = "replicas"
    SHRINK = "shrink"
    FORCE_MERGE = "forcemerge"
    DELETE = "delete"


@dataclass
class LifecycleAction:
    """阶段内动作数据模型.

    Attributes:
        name: 动作名称（如 "rollover", "shrink"）
        params: 动作参数，原样交给执行器

    Raises:
        PolicyValidationError: 当 name 为空时抛出

    Examples:
        >>> action = LifecycleAction(name="shrink", params={"number_of_shards": 1})
    """

    name: str
    params: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """校验动作名称."""
        if isinstance(self.name, ActionName):
            self.name = self.name.value
        if not self.name:
            raise PolicyValidationError("动作名称不能为空")
