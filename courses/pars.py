from dataclasses import dataclass
from typing import Iterable, Tuple

from core.exceptions import InvalidParProfileError, MissingParProfileError

HOLES_PER_ROUND = 18
MIN_PAR = 3
MAX_PAR = 6


@dataclass(frozen=True)
class CourseParProfile:
    """
    Par for each of the 18 holes of a course, in hole order.

    A profile is captured when a competition's results are computed, so later
    edits to the course never alter results that were already finalized.
    """

    pars: Tuple[int, ...]

    def __post_init__(self):
        pars = tuple(self.pars)
        if len(pars) != HOLES_PER_ROUND:
            raise MissingParProfileError(
                f"A par profile needs exactly {HOLES_PER_ROUND} holes, got {len(pars)}"
            )
        for hole_number, par in enumerate(pars, 1):
            if isinstance(par, bool) or not isinstance(par, int) or not MIN_PAR <= par <= MAX_PAR:
                raise InvalidParProfileError(
                    f"Par for hole {hole_number} must be between {MIN_PAR} and {MAX_PAR}, got {par!r}"
                )
        object.__setattr__(self, "pars", pars)

    @classmethod
    def from_holes(cls, holes: Iterable) -> "CourseParProfile":
        ordered = sorted(holes, key=lambda hole: hole.hole_number)
        return cls(tuple(hole.par for hole in ordered))

    @property
    def front_nine_total(self) -> int:
        return sum(self.pars[:9])

    @property
    def back_nine_total(self) -> int:
        return sum(self.pars[9:])

    @property
    def total(self) -> int:
        return sum(self.pars)

    def par_for(self, hole_number: int) -> int:
        return self.pars[hole_number - 1]
