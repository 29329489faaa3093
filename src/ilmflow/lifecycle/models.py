"""生命周期策略数据模型定义模块.

- Phase: 策略中的一个阶段，包含若干动作
- LifecyclePolicy: 完整的策略文档，阶段名到阶段的无序映射

模型只校验自身结构；阶段与动作是否被生命周期类型支持由
PolicyValidator 判断，执行顺序由 PolicyOrderer 给出。
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .actions import LifecycleAction
from .exceptions import PolicyValidationError
from .utils import parse_time_to_millis, validate_time_value

DEFAULT_LIFECYCLE_TYPE = "timeseries"


@dataclass
class Phase:
    """生命周期阶段数据模型.

    actions 的值可以是 LifecycleAction，也可以是动作参数字典
    （此时以键名构造 LifecycleAction）。声明顺序无意义。

    Attributes:
        name: 阶段名称（如 "hot", "warm", "cold", "delete"）
        min_age: 进入该阶段的最小时间，ES TimeValue 格式
        actions: 动作名称到动作的映射

    Raises:
        PolicyValidationError: 当 min_age 不合法或动作名称与键不一致时抛出

    Examples:
        >>> phase = Phase(
        ...     name="warm",
        ...     min_age="7d",
        ...     actions={"shrink": {"number_of_shards": 1}, "forcemerge": {}},
        ... )
    """

    name: str
    min_age: str = "0ms"
    actions: dict[str, LifecycleAction] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """校验阶段参数并规范化动作."""
        if not validate_time_value(self.min_age):
            raise PolicyValidationError(
                f"阶段 [{self.name}] 的 min_age 格式不合法: {self.min_age!r}，"
                "应为 ES 时间格式（如 '0ms', '30d'）"
            )
        self.actions = {
            key: _as_action(key, value) for key, value in self.actions.items()
        }

    @property
    def min_age_millis(self) -> int:
        """min_age 对应的毫秒数."""
        return parse_time_to_millis(self.min_age)


def _as_action(key: str, value: Any) -> LifecycleAction:
    if isinstance(value, LifecycleAction):
        if value.name != key:
            raise PolicyValidationError(
                f"动作名称 [{value.name}] 与键 [{key}] 不一致"
            )
        return value
    if value is None:
        return LifecycleAction(name=key)
    if not isinstance(value, Mapping):
        raise PolicyValidationError(
            f"动作 [{key}] 的参数必须为字典，当前类型: {type(value).__name__}"
        )
    return LifecycleAction(name=key, params=dict(value))


@dataclass
class LifecyclePolicy:
    """索引生命周期策略模型.

    Attributes:
        name: 策略名称（不可为空）
        phases: 阶段名称到阶段的映射，顺序无意义
        lifecycle_type: 约束该策略的生命周期类型标识

    Raises:
        PolicyValidationError: 当 name 为空或阶段名称与键不一致时抛出

    Examples:
        >>> policy = LifecyclePolicy(
        ...     name="logs",
        ...     phases={
        ...         "delete": Phase(name="delete", min_age="30d", actions={"delete": {}}),
        ...         "hot": Phase(name="hot", actions={"rollover": {"max_size": "50gb"}}),
        ...     },
        ... )
    """

    name: str
    phases: dict[str, Phase] = field(default_factory=dict)
    lifecycle_type: str = DEFAULT_LIFECYCLE_TYPE

    def __post_init__(self) -> None:
        """校验策略结构."""
        if not self.name:
            raise PolicyValidationError("策略名称不能为空")
        for key, phase in self.phases.items():
            if phase.name != key:
                raise PolicyValidationError(
                    f"阶段名称 [{phase.name}] 与键 [{key}] 不一致"
                )

    @classmethod
    def from_phases(
        cls,
        name: str,
        *phases: Phase,
        lifecycle_type: str = DEFAULT_LIFECYCLE_TYPE,
    ) -> "LifecyclePolicy":
        """以阶段列表构造策略，后出现的同名阶段覆盖前者."""
        return cls(
            name=name,
            phases={phase.name: phase for phase in phases},
            lifecycle_type=lifecycle_type,
        )
