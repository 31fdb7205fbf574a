"""
Domain services containing pure business logic.
"""

from domain.services.bidding_assignment_service import BiddingAssigner
from domain.services.pool_sampling_service import PoolSampler, RandomSource
from domain.services.stats_aggregation_service import StatsAggregator

__all__ = ["BiddingAssigner", "PoolSampler", "RandomSource", "StatsAggregator"]
