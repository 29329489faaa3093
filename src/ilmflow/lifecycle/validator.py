"""生命周期策略校验模块.

PolicyValidator 依据注入的 LifecycleType 检查阶段与动作是否合法。
校验失败既可以以值的形式返回（check / collect_violations），
也可以以异常的形式抛出（validate）。

为使报错可复现，阶段按名称排序遍历，阶段内动作同样按名称排序。
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .exceptions import (
    PolicyValidationError,
    UnsupportedActionError,
    UnsupportedPhaseError,
)
from .models import LifecyclePolicy, Phase
from .types import LifecycleType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UnsupportedPhase:
    """生命周期类型不支持的阶段."""

    type_name: str
    phase_name: str

    @property
    def message(self) -> str:
        return f"{self.type_name} 生命周期不支持阶段 [{self.phase_name}]"

    def to_exception(self) -> UnsupportedPhaseError:
        return UnsupportedPhaseError(self.message, phase_name=self.phase_name)


@dataclass(frozen=True)
class UnsupportedAction:
    """阶段中定义了不合法的动作."""

    type_name: str
    action_name: str
    phase_name: str

    @property
    def message(self) -> str:
        return f"阶段 [{self.phase_name}] 中定义了不合法的动作 [{self.action_name}]"

    def to_exception(self) -> UnsupportedActionError:
        return UnsupportedActionError(
            self.message, action_name=self.action_name, phase_name=self.phase_name
        )


Violation = UnsupportedPhase | UnsupportedAction


class PolicyValidator:
    """生命周期策略校验器.

    Args:
        lifecycle_type: 约束策略的规则表

    Examples:
        >>> validator = PolicyValidator(TIMESERIES_LIFECYCLE_TYPE)
        >>> validator.validate([Phase(name="hot", actions={"rollover": {}})])
    """

    def __init__(self, lifecycle_type: LifecycleType) -> None:
        self._lifecycle_type = lifecycle_type

    @property
    def lifecycle_type(self) -> LifecycleType:
        return self._lifecycle_type

    def _iter_violations(self, phases: Iterable[Phase]) -> Iterator[Violation]:
        type_name = self._lifecycle_type.get_type()
        for phase in sorted(phases, key=lambda p: p.name):
            if not self._lifecycle_type.is_valid_phase(phase.name):
                yield UnsupportedPhase(type_name=type_name, phase_name=phase.name)
                continue
            allowed = self._lifecycle_type.valid_actions_for(phase.name)
            for action_name in sorted(phase.actions):
                if action_name not in allowed:
                    yield UnsupportedAction(
                        type_name=type_name,
                        action_name=action_name,
                        phase_name=phase.name,
                    )

    def check(self, phases: Iterable[Phase]) -> Violation | None:
        """返回第一个违规项，全部合法时返回 None."""
        return next(self._iter_violations(phases), None)

    def collect_violations(self, phases: Iterable[Phase]) -> list[Violation]:
        """返回全部违规项."""
        return list(self._iter_violations(phases))

    def validate(self, phases: Iterable[Phase]) -> None:
        """校验阶段集合.

        Args:
            phases: 待校验的阶段

        Raises:
            UnsupportedPhaseError: 阶段不被生命周期类型支持
            UnsupportedActionError: 动作不被所在阶段支持
        """
        violation = self.check(phases)
        if violation is not None:
            logger.debug(f"策略校验失败: {violation.message}")
            raise violation.to_exception()

    def validate_policy(self, policy: LifecyclePolicy) -> None:
        """校验整个策略文档，任何违规都导致整个策略被拒绝."""
        if policy.lifecycle_type != self._lifecycle_type.get_type():
            raise PolicyValidationError(
                f"策略 '{policy.name}' 的生命周期类型 [{policy.lifecycle_type}] "
                f"与校验器类型 [{self._lifecycle_type.get_type()}] 不一致"
            )
        self.validate(policy.phases.values())
        logger.debug(f"策略 '{policy.name}' 校验通过")
