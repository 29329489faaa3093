"""策略校验器单元测试."""

from itertools import combinations

import pytest

from ilmflow.lifecycle.exceptions import (
    PolicyValidationError,
    UnsupportedActionError,
    UnsupportedPhaseError,
)
from ilmflow.lifecycle.models import LifecyclePolicy, Phase
from ilmflow.lifecycle.types import TIMESERIES_LIFECYCLE_TYPE
from ilmflow.lifecycle.validator import (
    PolicyValidator,
    UnsupportedAction,
    UnsupportedPhase,
)

VALID_ACTIONS = {
    "hot": ["rollover"],
    "warm": ["allocate", "replicas", "shrink", "forcemerge"],
    "cold": ["allocate", "replicas"],
    "delete": ["delete"],
}


def _action_subsets(actions: list[str]) -> list[tuple[str, ...]]:
    return [c for size in range(len(actions) + 1) for c in combinations(actions, size)]


@pytest.fixture
def validator() -> PolicyValidator:
    """创建 timeseries 校验器."""
    return PolicyValidator(TIMESERIES_LIFECYCLE_TYPE)


class TestUnsupportedPhase:
    """不支持阶段的校验测试."""

    @pytest.mark.parametrize("phase_name", ["frozen", "HOT", "", "warm ", "rollover"])
    def test_unknown_phase_raises_error(
        self, validator: PolicyValidator, phase_name: str
    ) -> None:
        """测试未知阶段抛出异常."""
        with pytest.raises(UnsupportedPhaseError, match="生命周期不支持阶段") as exc_info:
            validator.validate([Phase(name=phase_name)])
        assert exc_info.value.phase_name == phase_name

    def test_check_returns_violation(self, validator: PolicyValidator) -> None:
        """测试 check 以值的形式返回违规."""
        violation = validator.check([Phase(name="frozen")])
        assert violation == UnsupportedPhase(type_name="timeseries", phase_name="frozen")
        assert violation.message == "timeseries 生命周期不支持阶段 [frozen]"

    def test_unknown_phase_actions_not_inspected(self, validator: PolicyValidator) -> None:
        """测试未知阶段内的动作不再单独报错."""
        violations = validator.collect_violations(
            [Phase(name="frozen", actions={"bogus": {}})]
        )
        assert violations == [UnsupportedPhase(type_name="timeseries", phase_name="frozen")]


class TestUnsupportedAction:
    """不支持动作的校验测试."""

    @pytest.mark.parametrize(
        "phase_name, action_name",
        [
            ("hot", "delete"),
            ("hot", "shrink"),
            ("warm", "rollover"),
            ("warm", "delete"),
            ("cold", "shrink"),
            ("cold", "forcemerge"),
            ("delete", "allocate"),
            ("delete", "unknown"),
        ],
    )
    def test_invalid_action_raises_error(
        self, validator: PolicyValidator, phase_name: str, action_name: str
    ) -> None:
        """测试阶段中不合法的动作抛出异常."""
        phase = Phase(name=phase_name, actions={action_name: {}})
        with pytest.raises(UnsupportedActionError, match="不合法的动作") as exc_info:
            validator.validate([phase])
        assert exc_info.value.action_name == action_name
        assert exc_info.value.phase_name == phase_name

    def test_error_message_names_action_and_phase(self, validator: PolicyValidator) -> None:
        """测试错误信息包含动作与阶段名称."""
        violation = validator.check([Phase(name="cold", actions={"shrink": {}})])
        assert violation == UnsupportedAction(
            type_name="timeseries", action_name="shrink", phase_name="cold"
        )
        assert str(violation.to_exception()) == "阶段 [cold] 中定义了不合法的动作 [shrink]"

    def test_unsupported_errors_are_validation_errors(self) -> None:
        """测试异常继承关系."""
        assert issubclass(UnsupportedPhaseError, PolicyValidationError)
        assert issubclass(UnsupportedActionError, PolicyValidationError)


class TestValidPolicies:
    """合法策略的校验测试."""

    @pytest.mark.parametrize("phase_name", list(VALID_ACTIONS))
    def test_every_action_subset_is_valid(
        self, validator: PolicyValidator, phase_name: str
    ) -> None:
        """测试阶段合法动作的任意子集均可通过."""
        for subset in _action_subsets(VALID_ACTIONS[phase_name]):
            phase = Phase(name=phase_name, actions={name: {} for name in subset})
            assert validator.validate([phase]) is None
            assert validator.check([phase]) is None

    def test_full_policy_is_valid(self, validator: PolicyValidator) -> None:
        """测试包含全部阶段与动作的策略."""
        phases = [
            Phase(name=name, actions={action: {} for action in actions})
            for name, actions in VALID_ACTIONS.items()
        ]
        validator.validate(phases)
        assert validator.collect_violations(phases) == []

    def test_empty_input_is_valid(self, validator: PolicyValidator) -> None:
        """测试空阶段集合."""
        validator.validate([])


class TestDeterministicReporting:
    """多处违规时的报告顺序测试."""

    def test_collect_violations_sorted(self, validator: PolicyValidator) -> None:
        """测试违规按阶段名、动作名排序."""
        phases = [
            Phase(name="warm", actions={"rollover": {}, "delete": {}, "shrink": {}}),
            Phase(name="zeta"),
            Phase(name="alpha"),
        ]
        assert validator.collect_violations(phases) == [
            UnsupportedPhase(type_name="timeseries", phase_name="alpha"),
            UnsupportedAction(type_name="timeseries", action_name="delete", phase_name="warm"),
            UnsupportedAction(type_name="timeseries", action_name="rollover", phase_name="warm"),
            UnsupportedPhase(type_name="timeseries", phase_name="zeta"),
        ]

    def test_first_violation_independent_of_input_order(
        self, validator: PolicyValidator
    ) -> None:
        """测试首个违规与输入顺序无关."""
        a = Phase(name="cold", actions={"rollover": {}})
        b = Phase(name="bogus")
        assert validator.check([a, b]) == validator.check([b, a])


class TestValidatePolicy:
    """整体策略校验测试."""

    def test_valid_policy(self, validator: PolicyValidator) -> None:
        """测试合法策略通过."""
        policy = LifecyclePolicy.from_phases(
            "logs",
            Phase(name="hot", actions={"rollover": {"max_size": "50gb"}}),
            Phase(name="delete", min_age="30d", actions={"delete": {}}),
        )
        validator.validate_policy(policy)

    def test_type_mismatch_raises_error(self, validator: PolicyValidator) -> None:
        """测试策略类型与校验器类型不一致."""
        policy = LifecyclePolicy(name="logs", lifecycle_type="rolling")
        with pytest.raises(PolicyValidationError, match="生命周期类型"):
            validator.validate_policy(policy)
