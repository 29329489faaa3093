"""生命周期策略管理器模块.

提供 LifecyclePolicyManager，用于注册、校验策略，并按规范顺序
将阶段动作交给外部执行器运行。管理器本身不操作存储。
"""

import logging
from collections.abc import Mapping
from typing import Any, Protocol

from .actions import LifecycleAction
from .exceptions import PolicyExecutionError, PolicyNotFoundError
from .models import LifecyclePolicy, Phase
from .orderer import ExecutionStep, PolicyOrderer
from .types import BUILTIN_LIFECYCLE_TYPES, LifecycleType, get_lifecycle_type
from .validator import PolicyValidator

logger = logging.getLogger(__name__)


class ActionExecutor(Protocol):
    """执行阶段动作的外部执行器协议."""

    def execute(self, phase: Phase, action: LifecycleAction) -> Any: ...


class LifecyclePolicyManager:
    """生命周期策略管理器.

    注册时完成校验，任何违规都会拒绝整个策略；应用时按阶段、
    动作的规范顺序依次调用执行器。

    Args:
        executor: 外部执行器，apply_policy 时必需
        lifecycle_types: 可用的生命周期类型，缺省为内置类型

    Examples:
        >>> manager = LifecyclePolicyManager(executor)
        >>> manager.register_policy(
        ...     LifecyclePolicy.from_phases(
        ...         "logs",
        ...         Phase(name="hot", actions={"rollover": {"max_age": "1d"}}),
        ...         Phase(name="delete", min_age="30d", actions={"delete": {}}),
        ...     )
        ... )
        >>> result = manager.apply_policy("logs")
    """

    def __init__(
        self,
        executor: ActionExecutor | None = None,
        lifecycle_types: Mapping[str, LifecycleType] | None = None,
    ) -> None:
        """初始化策略管理器.

        Args:
            executor: 外部执行器
            lifecycle_types: 类型标识到规则表的映射
        """
        self._executor = executor
        self._lifecycle_types = (
            BUILTIN_LIFECYCLE_TYPES if lifecycle_types is None else lifecycle_types
        )
        self._policies: dict[str, LifecyclePolicy] = {}
        logger.info(
            f"初始化生命周期策略管理器 (类型: {sorted(self._lifecycle_types)})"
        )

    def _lifecycle_type_of(self, policy: LifecyclePolicy) -> LifecycleType:
        return get_lifecycle_type(policy.lifecycle_type, self._lifecycle_types)

    def register_policy(self, policy: LifecyclePolicy) -> "LifecyclePolicyManager":
        """校验并注册策略，同名策略会被覆盖.

        Args:
            policy: 策略对象

        Returns:
            自身实例，支持链式调用

        Raises:
            UnsupportedLifecycleTypeError: 策略的生命周期类型未注册
            PolicyValidationError: 策略包含不合法的阶段或动作
        """
        lifecycle_type = self._lifecycle_type_of(policy)
        PolicyValidator(lifecycle_type).validate_policy(policy)
        self._policies[policy.name] = policy
        logger.info(f"注册策略: {policy.name} (类型: {lifecycle_type.get_type()})")
        return self

    def get_policy(self, name: str) -> LifecyclePolicy:
        if name not in self._policies:
            raise PolicyNotFoundError(f"策略 '{name}' 不存在")
        return self._policies[name]

    def list_policies(self) -> list[str]:
        """列出所有已注册策略的名称."""
        return list(self._policies.keys())

    def remove_policy(self, name: str) -> "LifecyclePolicyManager":
        """移除指定策略.

        Raises:
            PolicyNotFoundError: 当策略名称不存在时抛出
        """
        if name not in self._policies:
            raise PolicyNotFoundError(f"策略 '{name}' 不存在")
        del self._policies[name]
        logger.info(f"移除策略: {name}")
        return self

    def _checked_orderer(self, policy: LifecyclePolicy) -> PolicyOrderer:
        # 注册后策略对象仍可能被调用方修改，排序前重新校验
        lifecycle_type = self._lifecycle_type_of(policy)
        PolicyValidator(lifecycle_type).validate_policy(policy)
        return PolicyOrderer(lifecycle_type)

    def get_execution_plan(self, name: str) -> list[ExecutionStep]:
        """返回策略按规范顺序展开的执行步骤.

        Raises:
            PolicyNotFoundError: 当策略名称不存在时抛出
            PolicyValidationError: 策略在注册后被修改为不合法时抛出
        """
        policy = self.get_policy(name)
        return self._checked_orderer(policy).execution_plan(policy.phases)

    def apply_policy(self, name: str) -> dict[str, Any]:
        """按规范顺序执行策略的全部动作.

        Args:
            name: 策略名称

        Returns:
            执行结果字典

        Raises:
            PolicyNotFoundError: 当策略名称不存在时抛出
            PolicyValidationError: 策略在注册后被修改为不合法时抛出
            PolicyExecutionError: 未配置执行器或执行器失败时抛出
        """
        if self._executor is None:
            raise PolicyExecutionError(f"未配置执行器，无法应用策略 '{name}'")

        policy = self.get_policy(name)
        orderer = self._checked_orderer(policy)
        phases = [phase.name for phase in orderer.ordered_phases(policy.phases)]
        plan = orderer.execution_plan(policy.phases)
        logger.info(f"开始应用策略: {name} (共 {len(plan)} 步)")

        steps_completed: list[str] = []
        for step in plan:
            label = f"{step.phase_name}/{step.action_name}"
            try:
                self._executor.execute(step.phase, step.action)
            except Exception as e:
                raise PolicyExecutionError(
                    f"执行策略 '{name}' 的步骤 {label} 失败"
                    f"（已完成步骤: {steps_completed}）: {e}"
                ) from e
            steps_completed.append(label)
            logger.debug(f"策略 '{name}' 完成步骤: {label}")

        return {
            "success": True,
            "policy_name": name,
            "phases": phases,
            "steps_completed": steps_completed,
        }

    def apply_all_policies(self) -> dict[str, dict[str, Any]]:
        """依次执行所有已注册的策略.

        Returns:
            以策略名称为键，执行结果或错误信息为值的字典
        """
        results: dict[str, dict[str, Any]] = {}
        for name in list(self._policies.keys()):
            try:
                results[name] = self.apply_policy(name)
            except Exception as e:
                results[name] = {
                    "success": False,
                    "error": str(e),
                    "error_type": type(e).__name__,
                }
                logger.error(f"策略 '{name}' 执行失败: {e}")
        return results
