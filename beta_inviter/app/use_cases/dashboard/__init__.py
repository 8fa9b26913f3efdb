from .get_dashboard_stats_use_case import (
    DashboardStatsResponse,
    GetDashboardStatsUseCase,
    InviteCodeStatsResponse,
)

__all__ = [
    "GetDashboardStatsUseCase",
    "DashboardStatsResponse",
    "InviteCodeStatsResponse",
]
