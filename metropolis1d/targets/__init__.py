"""Built-in target densities for Metropolis sampling."""

from enum import Enum

from metropolis1d.targets.base import TargetFunction
from metropolis1d.targets.shifted_square import ShiftedSquare
from metropolis1d.targets.sinus import Sinus


class TargetType(Enum):
    """Closed set of built-in targets."""

    SHIFTED_SQUARE = "shifted_square"
    SINUS = "sinus"


_TARGETS = {
    TargetType.SHIFTED_SQUARE: ShiftedSquare,
    TargetType.SINUS: Sinus,
}


def get_target(target):
    """
    Resolve a target selection into a target instance.

    Parameters
    ----------
    target : TargetType, str or TargetFunction
        Enum member, its name (case and separator insensitive, e.g.
        ``"shifted_square"`` or ``"Shifted Square"``) or a target instance

    Returns
    -------
    target : TargetFunction
        The selected target with its density and normalization constant

    Raises
    ------
    ValueError
        If the selection does not name a built-in target
    """
    if isinstance(target, TargetFunction):
        return target
    if isinstance(target, TargetType):
        return _TARGETS[target]()
    if isinstance(target, str):
        key = target.strip().upper().replace(" ", "_").replace("-", "_")
        if key in TargetType.__members__:
            return _TARGETS[TargetType[key]]()
    raise ValueError(f"Unknown target: {target!r}")


__all__ = [
    "TargetFunction",
    "ShiftedSquare",
    "Sinus",
    "TargetType",
    "get_target",
]
