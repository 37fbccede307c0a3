from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Optional

from core.exceptions import InvalidPointsRuleError
from core.util import to_decimal


def default_formula_points(position: int, field_size: int) -> int:
    """
    Points from the default formula: field size + 2 for the winner, field size
    for second, then one fewer per place. There is no floor, so low places in
    a small field can score zero or negative points.
    """
    if position <= 0:
        return 0
    if position == 1:
        return field_size + 2
    if position == 2:
        return field_size
    return field_size - (position - 1)


@dataclass(frozen=True)
class PointsRule:
    """
    How a finishing position converts into points.

    With no template the default formula applies. A template maps positions to
    points, and positions it does not list get default_points. The multiplier
    scales whichever base value applies.
    """

    template: Optional[Dict[int, int]] = None
    default_points: int = 0
    multiplier: Decimal = field(default=Decimal(1))

    def __post_init__(self):
        object.__setattr__(self, "multiplier", to_decimal(self.multiplier))
        if self.template is not None:
            template = {}
            for position, points in self.template.items():
                if isinstance(position, bool) or not isinstance(position, int) or position < 1:
                    raise InvalidPointsRuleError(f"Template positions must be positive integers, got {position!r}")
                template[position] = points
            object.__setattr__(self, "template", template)

    @classmethod
    def default_formula(cls, multiplier=1) -> "PointsRule":
        return cls(multiplier=multiplier)

    @classmethod
    def from_template(cls, template: Dict[int, int], default_points: int = 0, multiplier=1) -> "PointsRule":
        return cls(template=dict(template), default_points=default_points, multiplier=multiplier)

    @property
    def uses_formula(self) -> bool:
        return self.template is None

    def base_points(self, position: int, field_size: int) -> int:
        if self.template is None:
            return default_formula_points(position, field_size)
        if position <= 0:
            return 0
        return self.template.get(position, self.default_points)

    def scaled_points(self, position: int, field_size: int) -> Decimal:
        return Decimal(self.base_points(position, field_size)) * self.multiplier
