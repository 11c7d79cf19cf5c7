from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from employee_tracker.models.base import Base

class Employee(Base):
    __tablename__ = 'employees'

    id = Column("employee_id", Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(30), nullable=False)
    last_name = Column(String(30), nullable=False)
    role_id = Column(Integer, ForeignKey('roles.role_id'), nullable=False)
    manager_id = Column(Integer, ForeignKey('employees.employee_id'), nullable=True)

    role = relationship("Role", back_populates="employees")

    # Self-referencing manager
    manager = relationship("Employee", remote_side=[id], backref="reports")

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"

    def as_dict(self):
        data = {col.key: getattr(self, col.key) for col in self.__mapper__.column_attrs}
        if self.manager:
            data['manager'] = self.manager.full_name
        return data
