from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Iterable, Optional, Tuple

from core.exceptions import InvalidScoreEntryError
from core.util import to_decimal
from courses.pars import HOLES_PER_ROUND

UNREPORTED_VALUE = 0
GAVE_UP_VALUE = -1

MIN_HANDICAP_INDEX = Decimal("-10")
MAX_HANDICAP_INDEX = Decimal("54")


class HoleScoreKind(Enum):
    UNREPORTED = "unreported"
    GAVE_UP = "gave_up"
    STROKES = "strokes"


@dataclass(frozen=True)
class HoleScore:
    """
    One hole of a scorecard: not yet reported, attempted but given up, or a
    stroke count.

    Stored scorecards keep the integer form (0 = unreported, -1 = gave up,
    n > 0 = strokes); from_value and to_value convert between the two.
    """

    kind: HoleScoreKind
    strokes: int = 0

    @classmethod
    def unreported(cls) -> "HoleScore":
        return cls(HoleScoreKind.UNREPORTED)

    @classmethod
    def gave_up(cls) -> "HoleScore":
        return cls(HoleScoreKind.GAVE_UP)

    @classmethod
    def of(cls, strokes: int) -> "HoleScore":
        return cls(HoleScoreKind.STROKES, strokes)

    @classmethod
    def from_value(cls, value, hole_number: Optional[int] = None) -> "HoleScore":
        label = f"Hole {hole_number}" if hole_number is not None else "Hole score"
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidScoreEntryError(f"{label} must be an integer, got {value!r}")
        if value == UNREPORTED_VALUE:
            return cls.unreported()
        if value == GAVE_UP_VALUE:
            return cls.gave_up()
        if value > 0:
            return cls.of(value)
        raise InvalidScoreEntryError(
            f"{label} must be -1 (gave up), 0 (unreported) or a positive stroke count, got {value}"
        )

    def to_value(self) -> int:
        if self.kind is HoleScoreKind.STROKES:
            return self.strokes
        if self.kind is HoleScoreKind.GAVE_UP:
            return GAVE_UP_VALUE
        return UNREPORTED_VALUE

    @property
    def is_played(self) -> bool:
        return self.kind is not HoleScoreKind.UNREPORTED


@dataclass(frozen=True)
class ManualTotal:
    """A whole-round total entered instead of hole-by-hole scores. Only total is scored."""

    total: int
    out_score: Optional[int] = None
    in_score: Optional[int] = None

    def __post_init__(self):
        if isinstance(self.total, bool) or not isinstance(self.total, int) or self.total <= 0:
            raise InvalidScoreEntryError(f"Manual total must be a positive integer, got {self.total!r}")


@dataclass(frozen=True)
class RawEntry:
    hole_scores: Tuple[HoleScore, ...]
    manual_total: Optional[ManualTotal] = None
    handicap_index: Optional[Decimal] = None
    is_locked: bool = False
    is_dq: bool = False

    def __post_init__(self):
        if len(self.hole_scores) != HOLES_PER_ROUND:
            raise InvalidScoreEntryError(
                f"A scorecard must have {HOLES_PER_ROUND} hole scores, got {len(self.hole_scores)}"
            )
        if self.handicap_index is not None:
            handicap_index = to_decimal(self.handicap_index)
            if not MIN_HANDICAP_INDEX <= handicap_index <= MAX_HANDICAP_INDEX:
                raise InvalidScoreEntryError(
                    f"Handicap index must be between {MIN_HANDICAP_INDEX} and {MAX_HANDICAP_INDEX}, "
                    f"got {handicap_index}"
                )
            object.__setattr__(self, "handicap_index", handicap_index)

    @classmethod
    def from_values(cls, hole_values: Iterable[int], manual_total: Optional[ManualTotal] = None,
                    handicap_index=None, is_locked=False, is_dq=False) -> "RawEntry":
        """
        Build an entry from the stored integer scorecard.

        Raises:
            InvalidScoreEntryError: A hole value is not -1, 0 or a positive integer,
                the scorecard is not 18 holes long, or the handicap index is out of range.
        """
        values = list(hole_values if hole_values is not None else [])
        if len(values) != HOLES_PER_ROUND:
            raise InvalidScoreEntryError(
                f"A scorecard must have {HOLES_PER_ROUND} hole scores, got {len(values)}"
            )
        hole_scores = tuple(HoleScore.from_value(value, hole_number) for hole_number, value in enumerate(values, 1))
        return cls(
            hole_scores=hole_scores,
            manual_total=manual_total,
            handicap_index=handicap_index,
            is_locked=is_locked,
            is_dq=is_dq,
        )

    @classmethod
    def blank(cls, **kwargs) -> "RawEntry":
        return cls(hole_scores=tuple(HoleScore.unreported() for _ in range(HOLES_PER_ROUND)), **kwargs)
