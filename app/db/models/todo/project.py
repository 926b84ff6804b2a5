from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Index
from app.core.clock import utcnow
from app.db.session import Base


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(String(500), nullable=True)
    eta = Column(DateTime, nullable=False)
    status = Column(String(20), nullable=False, default="active")

    # Foreign key to User
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    # Tasks are not mapped as a relationship: stats are computed from queries
    # and deletion of children is driven explicitly by app.core.cascade.

    __table_args__ = (
        Index("ix_projects_owner_created", "owner_id", "created_at"),
        Index("ix_projects_owner_eta", "owner_id", "eta"),
    )

    def summary(self):
        return {"id": self.id, "name": self.name}

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "eta": self.eta,
            "status": self.status,
            "owner": self.owner_id,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
