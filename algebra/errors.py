"""Exception hierarchy shared by the number-theory kernel and the engines."""


class AlgebraError(Exception):
    """Base class for every error raised by the algebra package."""


class DimensionError(AlgebraError, ValueError):
    """Matrix operand does not have the engine's dimension."""


class NotInvertibleError(AlgebraError, ZeroDivisionError):
    """Element or matrix has no multiplicative inverse in its ring."""


class RankDeficientError(AlgebraError, ArithmeticError):
    """Elimination found a column without a non-zero pivot."""


class UnsupportedOperationError(AlgebraError, NotImplementedError):
    """The coefficient domain lacks a capability the operation needs."""


class DomainError(AlgebraError, ValueError):
    """Numeric input outside the operation's domain."""
