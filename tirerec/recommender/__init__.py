"""
Rider-level recommenders composing the pressure and wind models.
"""

from tirerec.recommender.pressures import PressureRecommender
from tirerec.recommender.wind import HeadingAdvisor, NO_WIND_DATA
from tirerec.recommender.ride import recommend_ride

__all__ = ["PressureRecommender", "HeadingAdvisor", "NO_WIND_DATA", "recommend_ride"]
