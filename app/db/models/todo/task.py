from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, DateTime, Index
from sqlalchemy.orm import relationship
from app.core.clock import utcnow
from app.db.session import Base


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(String(1000), nullable=True)
    module_name = Column(String(50), nullable=False)
    due_date = Column(DateTime, nullable=False)
    completed = Column(Boolean, nullable=False, default=False)
    priority = Column(String(10), nullable=False, default="medium")

    # Foreign Keys
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    # Read-only join used for the project summary in responses
    project = relationship("Project", lazy="joined", viewonly=True)

    __table_args__ = (
        Index("ix_tasks_owner_project", "owner_id", "project_id"),
        Index("ix_tasks_project_due", "project_id", "due_date"),
        Index("ix_tasks_owner_due", "owner_id", "due_date"),
    )

    def summary(self):
        return {"id": self.id, "name": self.name, "module_name": self.module_name}

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "module_name": self.module_name,
            "due_date": self.due_date,
            "completed": self.completed,
            "priority": self.priority,
            "project": self.project.summary() if self.project else {"id": self.project_id, "name": None},
            "owner": self.owner_id,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
