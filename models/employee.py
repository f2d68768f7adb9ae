# models/employee.py
import enum
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime, Text, Enum
from sqlalchemy.orm import declarative_base

from utils.skills import decode_skills

Base = declarative_base()


def utcnow():
    return datetime.now(timezone.utc)


class EmployeeStatus(str, enum.Enum):
    ACTIVE = "active"
    DELETED = "deleted"


class Employee(Base):
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    # unique regardless of status: deleted rows keep their email
    email = Column(String(255), nullable=False, unique=True, index=True)
    mobile_no = Column(String(20), nullable=False)

    # JSON array of skill tokens, see utils/skills.py
    skills = Column(Text, nullable=False)

    status = Column(
        Enum(EmployeeStatus, name="employee_status", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=EmployeeStatus.ACTIVE,
    )
    deleted_at = Column(DateTime, nullable=True, index=True)

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    @property
    def is_deleted(self) -> bool:
        return self.status == EmployeeStatus.DELETED or self.deleted_at is not None

    @property
    def skill_list(self):
        return decode_skills(self.skills)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "mobile_no": self.mobile_no,
            "skills": self.skill_list,
            "status": self.status.value if self.status else None,
            "deleted_at": self.deleted_at.isoformat() if self.deleted_at else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<Employee id={self.id} email={self.email!r} status={self.status}>"
