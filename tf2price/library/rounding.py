from enum import Enum
from .constants import ONE_REF


class Rounding(Enum):
    NONE = "none"
    UP_SCRAP = "up_scrap"
    DOWN_SCRAP = "down_scrap"
    REFINED = "refined"
    UP_REFINED = "up_refined"
    DOWN_REFINED = "down_refined"


# Rounds a metal value onto scrap or refined boundaries
def round_metal(metal: int, rounding: Rounding) -> int:
    if metal == 0:
        return metal

    if rounding is Rounding.UP_SCRAP:
        # Even values are already whole scrap
        return metal + 1 if metal % 2 != 0 else metal
    elif rounding is Rounding.DOWN_SCRAP:
        return metal - 1 if metal % 2 != 0 else metal
    elif rounding is Rounding.REFINED:
        value = metal + ONE_REF // 2
        # Floored modulo, so negative values land on the lower boundary as well
        return value - value % ONE_REF
    elif rounding is Rounding.UP_REFINED:
        return -(-metal // ONE_REF) * ONE_REF
    elif rounding is Rounding.DOWN_REFINED:
        return metal // ONE_REF * ONE_REF
    elif rounding is Rounding.NONE:
        return metal
    raise TypeError(f"Expected a Rounding, got {rounding!r}")
