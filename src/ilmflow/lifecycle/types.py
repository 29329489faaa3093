"""生命周期类型规则表模块.

LifecycleType 是一份只读的规则数据：合法阶段及其规范顺序、
每个阶段的合法动作集合以及动作的规范执行顺序。实例在构造后不可变，
可被任意数量的策略、线程无锁共享读取。

内置 TIMESERIES_LIFECYCLE_TYPE（"timeseries"）::

    hot    -> rollover
    warm   -> allocate, shrink, forcemerge, replicas
    cold   -> replicas, allocate
    delete -> delete
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from .actions import ActionName
from .exceptions import LifecycleTypeError, UnsupportedLifecycleTypeError

_EMPTY_ACTIONS: frozenset[str] = frozenset()


@dataclass(frozen=True, eq=False)
class LifecycleType:
    """生命周期类型规则表.

    Attributes:
        type: 类型标识，用作序列化判别字段以及选择规则表的键
        phase_order: 合法阶段名称的规范顺序
        valid_actions: 阶段名称到合法动作集合的只读映射
        action_order: 阶段名称到动作规范顺序的只读映射

    Raises:
        LifecycleTypeError: 当规则表自相矛盾时抛出
    """

    type: str
    phase_order: tuple[str, ...]
    valid_actions: Mapping[str, frozenset[str]]
    action_order: Mapping[str, tuple[str, ...]]

    def __post_init__(self) -> None:
        """冻结映射并校验规则表一致性."""
        object.__setattr__(self, "phase_order", tuple(self.phase_order))
        object.__setattr__(
            self,
            "valid_actions",
            MappingProxyType(
                {phase: frozenset(names) for phase, names in self.valid_actions.items()}
            ),
        )
        object.__setattr__(
            self,
            "action_order",
            MappingProxyType(
                {phase: tuple(names) for phase, names in self.action_order.items()}
            ),
        )
        self._check_consistency()

    def _check_consistency(self) -> None:
        if not self.type:
            raise LifecycleTypeError("生命周期类型标识不能为空")
        if not self.phase_order:
            raise LifecycleTypeError(f"生命周期类型 [{self.type}] 未定义任何阶段")
        if len(set(self.phase_order)) != len(self.phase_order):
            raise LifecycleTypeError(
                f"生命周期类型 [{self.type}] 的阶段顺序存在重复: {list(self.phase_order)}"
            )

        known = set(self.phase_order)
        extra = (set(self.valid_actions) | set(self.action_order)) - known
        if extra:
            raise LifecycleTypeError(
                f"生命周期类型 [{self.type}] 为未声明的阶段定义了动作: {sorted(extra)}"
            )

        for phase in self.phase_order:
            if phase not in self.valid_actions or phase not in self.action_order:
                raise LifecycleTypeError(
                    f"生命周期类型 [{self.type}] 缺少阶段 [{phase}] 的动作定义"
                )
            order = self.action_order[phase]
            if len(set(order)) != len(order):
                raise LifecycleTypeError(
                    f"阶段 [{phase}] 的动作顺序存在重复: {list(order)}"
                )
            if set(order) != self.valid_actions[phase]:
                raise LifecycleTypeError(
                    f"阶段 [{phase}] 的动作顺序 {list(order)} 与合法动作集合 "
                    f"{sorted(self.valid_actions[phase])} 不一致"
                )

    @classmethod
    def create(
        cls,
        type_name: str,
        action_order: Mapping[str, Sequence[str]],
        valid_actions: Mapping[str, Sequence[str]] | None = None,
    ) -> "LifecycleType":
        """声明式构造规则表.

        Args:
            type_name: 类型标识
            action_order: 阶段到动作规范顺序的有序映射，键的顺序即阶段顺序
            valid_actions: 阶段到合法动作的映射，缺省时取 action_order 中的动作

        Returns:
            LifecycleType 实例

        Examples:
            >>> LifecycleType.create("simple", {"hot": ["rollover"], "delete": ["delete"]})
        """
        if valid_actions is None:
            valid_actions = action_order
        return cls(
            type=type_name,
            phase_order=tuple(action_order),
            valid_actions={phase: frozenset(names) for phase, names in valid_actions.items()},
            action_order={phase: tuple(names) for phase, names in action_order.items()},
        )

    def get_type(self) -> str:
        """返回类型标识."""
        return self.type

    @property
    def valid_phases(self) -> frozenset[str]:
        return frozenset(self.phase_order)

    def is_valid_phase(self, phase_name: str) -> bool:
        return phase_name in self.valid_actions

    def valid_actions_for(self, phase_name: str) -> frozenset[str]:
        """返回阶段的合法动作集合，未知阶段返回空集合."""
        return self.valid_actions.get(phase_name, _EMPTY_ACTIONS)

    def action_order_for(self, phase_name: str) -> tuple[str, ...]:
        """返回阶段的动作规范顺序，未知阶段返回空元组."""
        return self.action_order.get(phase_name, ())


TIMESERIES_LIFECYCLE_TYPE = LifecycleType.create(
    "timeseries",
    {
        "hot": [ActionName.ROLLOVER.value],
        "warm": [
            ActionName.ALLOCATE.value,
            ActionName.SHRINK.value,
            ActionName.FORCE_MERGE.value,
            ActionName.REPLICAS.value,
        ],
        "cold": [ActionName.REPLICAS.value, ActionName.ALLOCATE.value],
        "delete": [ActionName.DELETE.value],
    },
)

BUILTIN_LIFECYCLE_TYPES: Mapping[str, LifecycleType] = MappingProxyType(
    {TIMESERIES_LIFECYCLE_TYPE.get_type(): TIMESERIES_LIFECYCLE_TYPE}
)


def get_lifecycle_type(
    type_name: str,
    lifecycle_types: Mapping[str, LifecycleType] | None = None,
) -> LifecycleType:
    """按类型标识查找规则表.

    Args:
        type_name: 类型标识，如 "timeseries"
        lifecycle_types: 可选的类型映射，缺省使用 BUILTIN_LIFECYCLE_TYPES

    Returns:
        对应的 LifecycleType

    Raises:
        UnsupportedLifecycleTypeError: 当类型未注册时抛出
    """
    types = BUILTIN_LIFECYCLE_TYPES if lifecycle_types is None else lifecycle_types
    try:
        return types[type_name]
    except KeyError:
        raise UnsupportedLifecycleTypeError(
            f"不支持的生命周期类型 [{type_name}]，可用类型: {sorted(types)}",
            type_name=type_name,
        ) from None
