from sqlalchemy import Column, Integer, String, Boolean, Float, ForeignKey, DateTime, Index
from sqlalchemy.orm import relationship
from app.core.clock import utcnow
from app.db.session import Base


class Todo(Base):
    __tablename__ = "todos"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(100), nullable=False)
    description = Column(String(500), nullable=True)
    completed = Column(Boolean, nullable=False, default=False)
    due_date = Column(DateTime, nullable=False)
    priority = Column(String(10), nullable=False, default="medium")
    estimated_time = Column(Float, nullable=False, default=0)

    # Foreign Keys
    task_id = Column(Integer, ForeignKey("tasks.id"), nullable=False)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    # Read-only join used for the task summary in responses
    task = relationship("Task", lazy="joined", viewonly=True)

    __table_args__ = (
        Index("ix_todos_owner_task", "owner_id", "task_id"),
        Index("ix_todos_task_due", "task_id", "due_date"),
        Index("ix_todos_owner_due", "owner_id", "due_date"),
        Index("ix_todos_owner_created", "owner_id", "created_at"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "completed": self.completed,
            "due_date": self.due_date,
            "priority": self.priority,
            "estimated_time": self.estimated_time,
            "task": self.task.summary() if self.task else {"id": self.task_id, "name": None, "module_name": None},
            "owner": self.owner_id,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
