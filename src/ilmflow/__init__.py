"""ilmflow - 索引生命周期策略规则引擎.

校验分层（hot/warm/cold/delete）索引生命周期策略的阶段与动作，
并给出阶段、动作的规范执行顺序，供外部执行器使用。

主要功能:
    - LifecycleType: 生命周期类型规则表
    - PolicyValidator: 策略校验
    - PolicyOrderer: 阶段与动作排序
    - LifecyclePolicyManager: 策略注册与执行编排

使用示例:
    from ilmflow import Phase, PolicyValidator, TIMESERIES_LIFECYCLE_TYPE

    validator = PolicyValidator(TIMESERIES_LIFECYCLE_TYPE)
    validator.validate([Phase(name="hot", actions={"rollover": {}})])
"""

__version__ = "0.1.0"

# 导出异常
from ilmflow.exceptions import IlmFlowError

# 导出生命周期组件
from ilmflow.lifecycle import (
    TIMESERIES_LIFECYCLE_TYPE,
    ActionName,
    ExecutionStep,
    LifecycleAction,
    LifecyclePolicy,
    LifecyclePolicyManager,
    LifecycleType,
    Phase,
    PolicyError,
    PolicyOrderer,
    PolicyValidationError,
    PolicyValidator,
    UnsupportedActionError,
    UnsupportedPhaseError,
    get_lifecycle_type,
)

__all__ = [
    # 版本
    "__version__",
    # 规则表
    "LifecycleType",
    "TIMESERIES_LIFECYCLE_TYPE",
    "get_lifecycle_type",
    # 数据模型
    "ActionName",
    "LifecycleAction",
    "Phase",
    "LifecyclePolicy",
    # 校验、排序与管理
    "PolicyValidator",
    "PolicyOrderer",
    "ExecutionStep",
    "LifecyclePolicyManager",
    # 异常
    "IlmFlowError",
    "PolicyError",
    "PolicyValidationError",
    "UnsupportedPhaseError",
    "UnsupportedActionError",
]
