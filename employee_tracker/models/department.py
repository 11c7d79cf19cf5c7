from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from employee_tracker.models.base import Base

class Department(Base):
    __tablename__ = 'departments'

    id = Column("department_id", Integer, primary_key=True, autoincrement=True)
    name = Column(String(30), nullable=False)

    roles = relationship("Role", back_populates="department")

    def as_dict(self):
        return {
            "id": self.id,
            "name": self.name
        }
