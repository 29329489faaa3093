"""生命周期策略异常定义模块."""

from ..exceptions import IlmFlowError


class PolicyError(IlmFlowError):
    """策略基础异常类.

    所有生命周期策略相关异常的基类，继承自 IlmFlowError。
    """

    pass


class PolicyValidationError(PolicyError):
    """策略校验异常.

    当策略文档不合法时抛出，例如阶段或动作不受生命周期类型支持、
    阶段名称与字典键不一致、min_age 格式错误等。
    """

    pass


class UnsupportedPhaseError(PolicyValidationError):
    """生命周期类型不支持的阶段.

    Attributes:
        phase_name: 不合法的阶段名称
    """

    def __init__(self, message: str, phase_name: str) -> None:
        super().__init__(message)
        self.phase_name = phase_name


class UnsupportedActionError(PolicyValidationError):
    """阶段中不支持的动作.

    同一动作可能在某一阶段合法、在另一阶段不合法。

    Attributes:
        action_name: 不合法的动作名称
        phase_name: 动作所在的阶段名称
    """

    def __init__(self, message: str, action_name: str, phase_name: str) -> None:
        super().__init__(message)
        self.action_name = action_name
        self.phase_name = phase_name


class LifecycleTypeError(PolicyError):
    """生命周期类型定义不合法异常."""

    pass


class UnsupportedLifecycleTypeError(LifecycleTypeError):
    """未知的生命周期类型.

    Attributes:
        type_name: 请求的类型标识
    """

    def __init__(self, message: str, type_name: str) -> None:
        super().__init__(message)
        self.type_name = type_name


class PolicyExecutionError(PolicyError):
    """策略执行异常.

    当执行器在运行某个阶段动作时失败，或未配置执行器时抛出。
    """

    pass


class PolicyNotFoundError(PolicyError):
    """策略未找到异常.

    当请求的策略名称在管理器中不存在时抛出。
    """

    pass
