"""
Heading scoring for wind-aware ride planning.

Evaluates and ranks riding headings based on tailwind and crosswind.
"""

from tirerec.scoring.headings import HeadingScorer, recommend_headings

__all__ = ["HeadingScorer", "recommend_headings"]
