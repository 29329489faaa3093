"""生命周期执行顺序模块.

PolicyOrderer 按注入的 LifecycleType 给出阶段与动作的规范执行顺序。
排序不做校验：未知阶段或动作被静默忽略，不会抛出异常。
调用方应先用 PolicyValidator 校验策略。
"""

from collections.abc import Mapping
from dataclasses import dataclass

from .actions import LifecycleAction
from .models import Phase
from .types import LifecycleType


@dataclass(frozen=True, eq=False)
class ExecutionStep:
    """执行计划中的一步：某阶段内的一个动作."""

    phase: Phase
    action: LifecycleAction

    @property
    def phase_name(self) -> str:
        return self.phase.name

    @property
    def action_name(self) -> str:
        return self.action.name


class PolicyOrderer:
    """阶段与动作排序器.

    Args:
        lifecycle_type: 提供规范顺序的规则表

    Examples:
        >>> orderer = PolicyOrderer(TIMESERIES_LIFECYCLE_TYPE)
        >>> [p.name for p in orderer.ordered_phases({"delete": d, "hot": h})]
        ['hot', 'delete']
    """

    def __init__(self, lifecycle_type: LifecycleType) -> None:
        self._lifecycle_type = lifecycle_type

    @property
    def lifecycle_type(self) -> LifecycleType:
        return self._lifecycle_type

    def ordered_phases(self, phase_by_name: Mapping[str, Phase]) -> list[Phase]:
        """按规范顺序返回存在的阶段，缺失阶段跳过."""
        return [
            phase_by_name[name]
            for name in self._lifecycle_type.phase_order
            if name in phase_by_name
        ]

    def ordered_actions(self, phase: Phase) -> list[LifecycleAction]:
        """按阶段的规范动作顺序返回存在的动作，未知阶段返回空列表."""
        return [
            phase.actions[name]
            for name in self._lifecycle_type.action_order_for(phase.name)
            if name in phase.actions
        ]

    def execution_plan(self, phase_by_name: Mapping[str, Phase]) -> list[ExecutionStep]:
        """将阶段与动作展开为单一的执行序列."""
        return [
            ExecutionStep(phase=phase, action=action)
            for phase in self.ordered_phases(phase_by_name)
            for action in self.ordered_actions(phase)
        ]
