from api.routes.stats import StatsController

__all__ = ["StatsController"]
