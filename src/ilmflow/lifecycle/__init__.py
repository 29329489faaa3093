"""索引生命周期策略子模块.

提供生命周期策略的规则表、校验与排序，包括：
- 生命周期类型规则表（LifecycleType, TIMESERIES_LIFECYCLE_TYPE）
- 策略校验器（PolicyValidator）
- 阶段与动作排序器（PolicyOrderer）
- 策略管理器（LifecyclePolicyManager）

示例用法:
    >>> from ilmflow.lifecycle import (
    ...     TIMESERIES_LIFECYCLE_TYPE, Phase, PolicyOrderer, PolicyValidator,
    ... )
    >>> phases = {
    ...     "delete": Phase(name="delete", min_age="30d", actions={"delete": {}}),
    ...     "hot": Phase(name="hot", actions={"rollover": {"max_size": "50gb"}}),
    ... }
    >>> PolicyValidator(TIMESERIES_LIFECYCLE_TYPE).validate(phases.values())
    >>> [p.name for p in PolicyOrderer(TIMESERIES_LIFECYCLE_TYPE).ordered_phases(phases)]
    ['hot', 'delete']
"""

from .actions import ActionName, LifecycleAction
from .exceptions import (
    LifecycleTypeError,
    PolicyError,
    PolicyExecutionError,
    PolicyNotFoundError,
    PolicyValidationError,
    UnsupportedActionError,
    UnsupportedLifecycleTypeError,
    UnsupportedPhaseError,
)
from .manager import ActionExecutor, LifecyclePolicyManager
from .models import LifecyclePolicy, Phase
from .orderer import ExecutionStep, PolicyOrderer
from .types import (
    BUILTIN_LIFECYCLE_TYPES,
    TIMESERIES_LIFECYCLE_TYPE,
    LifecycleType,
    get_lifecycle_type,
)
from .utils import parse_time_to_millis, validate_time_value
from .validator import PolicyValidator, UnsupportedAction, UnsupportedPhase, Violation

__all__ = [
    # 规则表
    "LifecycleType",
    "TIMESERIES_LIFECYCLE_TYPE",
    "BUILTIN_LIFECYCLE_TYPES",
    "get_lifecycle_type",
    # 数据模型
    "ActionName",
    "LifecycleAction",
    "Phase",
    "LifecyclePolicy",
    # 校验与排序
    "PolicyValidator",
    "UnsupportedPhase",
    "UnsupportedAction",
    "Violation",
    "PolicyOrderer",
    "ExecutionStep",
    # 策略管理器
    "LifecyclePolicyManager",
    "ActionExecutor",
    # 异常类
    "PolicyError",
    "PolicyValidationError",
    "UnsupportedPhaseError",
    "UnsupportedActionError",
    "LifecycleTypeError",
    "UnsupportedLifecycleTypeError",
    "PolicyExecutionError",
    "PolicyNotFoundError",
    # 工具函数
    "validate_time_value",
    "parse_time_to_millis",
]
