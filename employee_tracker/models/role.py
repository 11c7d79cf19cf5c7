from sqlalchemy import Column, Integer, String, Float, ForeignKey
from sqlalchemy.orm import relationship
from employee_tracker.models.base import Base

class Role(Base):
    __tablename__ = 'roles'

    id = Column("role_id", Integer, primary_key=True, autoincrement=True)
    title = Column(String(30), nullable=False)
    salary = Column(Float, nullable=False)
    department_id = Column(Integer, ForeignKey('departments.department_id'), nullable=False)

    department = relationship("Department", back_populates="roles")
    employees = relationship("Employee", back_populates="role")

    def as_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "salary": self.salary,
            "department_id": self.department_id,
            "department": self.department.name if self.department else None
        }
