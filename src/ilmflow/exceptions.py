"""ilmflow 异常定义模块."""


class IlmFlowError(Exception):
    """ilmflow 基础异常类."""

    pass
