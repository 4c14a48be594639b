"""
Heading search and ranking against an observed wind.

Evaluates candidate headings on a fixed lattice, ranks them by
tailwind-minus-crosswind score and picks a spread-out top set.
"""

import math
from typing import Optional

from tirerec.models.inputs import HeadingOptions
from tirerec.models.outputs import HeadingCandidate
from tirerec.physics.wind import (
    angle_diff,
    bearing_to_compass,
    in_intervals,
    score_heading,
)


class HeadingScorer:
    """
    Scores and ranks riding headings for one wind observation.

    Scoring Philosophy:
    - Tailwind counts in full, headwind counts against
    - Crosswind is penalized by a configurable weight
    - Returned headings are at least min_separation_deg apart so the
      suggestions are not all clustered at the optimum
    """

    def __init__(self, wind_from_deg: float, wind_speed: float, options: Optional[HeadingOptions] = None):
        """
        Initialize scorer with a wind observation and search options.

        Args:
            wind_from_deg: Meteorological wind direction (FROM), degrees
            wind_speed: Wind speed in any consistent unit
            options: Search options; defaults to HeadingOptions()
        """
        self.wind_from_deg = wind_from_deg
        self.wind_speed = wind_speed
        self.options = options or HeadingOptions()

        if self.options.resolution_deg <= 0:
            raise ValueError("resolution_deg must be positive")
        if self.options.top_k < 0:
            raise ValueError("top_k must be non-negative")
        if self.options.min_separation_deg < 0:
            raise ValueError("min_separation_deg must be non-negative")

    @property
    def has_data(self) -> bool:
        return math.isfinite(self.wind_from_deg) and math.isfinite(self.wind_speed)

    def score(self, heading_deg: float) -> HeadingCandidate:
        """Score a single heading."""
        result = score_heading(
            self.wind_from_deg,
            self.wind_speed,
            heading_deg,
            self.options.crosswind_penalty,
        )
        return HeadingCandidate(
            heading_deg=heading_deg,
            heading_label=bearing_to_compass(heading_deg),
            score=result.score,
            tail_component=result.tail_component,
            cross_component=result.cross_component,
            wind_toward_deg=result.wind_toward_deg,
        )

    def lattice(self) -> list[float]:
        """Headings to evaluate: [0, 360) at the configured step, filtered by allowed intervals."""
        step = self.options.resolution_deg
        headings = []
        i = 0
        while i * step < 360:
            heading = i * step
            if in_intervals(heading, self.options.allowed_headings):
                headings.append(heading)
            i += 1
        return headings

    def rank(self) -> list[HeadingCandidate]:
        """All lattice candidates sorted by score, best first."""
        candidates = [self.score(h) for h in self.lattice()]
        candidates.sort(key=lambda c: c.score, reverse=True)
        return candidates

    def recommend(self) -> list[HeadingCandidate]:
        """
        Pick up to top_k well-separated headings.

        Returns:
            Candidates ordered by score; empty when the wind has no data
        """
        if not self.has_data:
            return []

        picked: list[HeadingCandidate] = []
        for candidate in self.rank():
            if len(picked) >= self.options.top_k:
                break
            too_close = any(
                abs(angle_diff(p.heading_deg, candidate.heading_deg)) < self.options.min_separation_deg
                for p in picked
            )
            if not too_close:
                picked.append(candidate)
        return picked


def recommend_headings(
    wind_from_deg: float,
    wind_speed: float,
    options: Optional[HeadingOptions] = None,
) -> list[HeadingCandidate]:
    """Recommend up to top_k spread-out headings for the wind (see HeadingScorer)."""
    return HeadingScorer(wind_from_deg, wind_speed, options).recommend()
