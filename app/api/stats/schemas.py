from app.api.schemas import CamelModel, DataResponse


class PriorityDistribution(CamelModel):
    high: int
    medium: int
    low: int


class StatusDistribution(CamelModel):
    active: int
    completed: int
    on_hold: int


class ProjectCounts(CamelModel):
    total: int
    active: int
    completed: int
    status_distribution: StatusDistribution


class ItemCounts(CamelModel):
    total: int
    completed: int
    pending: int
    overdue: int
    priority_distribution: PriorityDistribution


class RecentActivity(CamelModel):
    projects: int
    tasks: int
    todos: int


class CompletionRate(CamelModel):
    tasks: int
    todos: int


class DashboardStats(CamelModel):
    projects: ProjectCounts
    tasks: ItemCounts
    todos: ItemCounts
    recent_activity: RecentActivity
    completion_rate: CompletionRate


DashboardResponse = DataResponse[DashboardStats]
