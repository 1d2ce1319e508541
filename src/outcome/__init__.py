from ._typecheck import install_runtime_checks

install_runtime_checks()

from .core import Failure, Outcome, Success  # noqa: E402
from .exceptions import OutcomePanicError  # noqa: E402

__all__: list[str] = ["Failure", "Outcome", "OutcomePanicError", "Success"]
