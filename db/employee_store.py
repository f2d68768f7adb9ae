# db/employee_store.py
"""
Record store for employees.

Every operation runs in its own session / transaction: open, commit or roll
back, close. Returned Employee objects are detached but fully loaded.
"""
from contextlib import contextmanager
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, OperationalError

from db.database import SessionLocal
from models.employee import Employee, EmployeeStatus, utcnow
from utils.errors import (
    DuplicateEmail,
    EmployeeAlreadyDeleted,
    EmployeeNotFound,
    StoreUnavailable,
)
from utils.skills import encode_skills

# Fields the update path is allowed to overwrite
EDITABLE_FIELDS = ("name", "email", "mobile_no", "skills")


def _is_email_conflict(exc: IntegrityError) -> bool:
    """
    True when the driver reports the unique email index as the failed
    constraint (sqlite "UNIQUE constraint failed: employees.email",
    postgres / mysql "duplicate key ... ix_employees_email").
    """
    detail = str(exc.orig).lower()
    return "email" in detail and ("unique" in detail or "duplicate" in detail)


@contextmanager
def _session():
    session = SessionLocal()
    try:
        yield session
    except IntegrityError as exc:
        session.rollback()
        if _is_email_conflict(exc):
            raise DuplicateEmail() from exc
        raise
    except OperationalError as exc:
        session.rollback()
        raise StoreUnavailable() from exc
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def _apply(employee: Employee, fields: dict):
    for key in EDITABLE_FIELDS:
        if key not in fields:
            continue
        value = fields[key]
        if key == "skills":
            value = encode_skills(value)
        setattr(employee, key, value)


def list_employees(include_deleted: bool = False) -> List[Employee]:
    """Active employees by default; include_deleted returns every row."""
    with _session() as session:
        query = session.query(Employee)
        if not include_deleted:
            query = query.filter(
                Employee.status == EmployeeStatus.ACTIVE,
                Employee.deleted_at.is_(None),
            )
        return query.order_by(Employee.id).all()


def find_by_id(employee_id: int) -> Employee:
    """
    Look up an employee by primary key. Soft-deleted rows are returned too;
    callers that need a live record check `is_deleted`.
    """
    with _session() as session:
        employee = session.get(Employee, employee_id)
        if employee is None:
            raise EmployeeNotFound()
        return employee


def email_in_use(email: str, exclude_id: Optional[int] = None) -> bool:
    with _session() as session:
        query = session.query(Employee.id).filter(Employee.email == email)
        if exclude_id is not None:
            query = query.filter(Employee.id != exclude_id)
        return query.first() is not None


def create_employee(fields: dict) -> Employee:
    with _session() as session:
        employee = Employee(status=EmployeeStatus.ACTIVE, deleted_at=None)
        _apply(employee, fields)
        session.add(employee)
        session.commit()
        session.refresh(employee)
        return employee


def update_employee(employee_id: int, fields: dict) -> Employee:
    """Overwrites name / email / mobile_no / skills. Status is never touched."""
    with _session() as session:
        employee = session.get(Employee, employee_id)
        if employee is None:
            raise EmployeeNotFound()
        _apply(employee, fields)
        session.commit()
        session.refresh(employee)
        return employee


def soft_delete_employee(employee_id: int) -> Employee:
    """One-way active -> deleted transition; status and deleted_at move together."""
    with _session() as session:
        employee = session.get(Employee, employee_id)
        if employee is None:
            raise EmployeeNotFound()
        if employee.is_deleted:
            raise EmployeeAlreadyDeleted()
        employee.status = EmployeeStatus.DELETED
        employee.deleted_at = utcnow()
        session.commit()
        session.refresh(employee)
        return employee
