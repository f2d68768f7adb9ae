# controllers/employee_controller.py
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationInfo, field_validator

from db import employee_store
from models.employee import Employee
from utils.errors import DuplicateEmail, EmployeeNotFound
from utils.skills import unknown_skills


# ---- Pydantic models ----
class EmployeeSchema(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    mobile_no: str = Field(..., min_length=1, max_length=20)
    skills: List[str] = Field(..., min_length=1)

    @field_validator("skills", mode="before")
    @classmethod
    def coerce_single_skill(cls, value):
        # a form with one selected option posts a plain string
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("skills")
    @classmethod
    def check_skills(cls, value, info: ValidationInfo):
        tokens = [s.strip() for s in value]
        if any(not s for s in tokens):
            raise ValueError("skills must not contain empty values")

        vocabulary = (info.context or {}).get("skill_vocabulary")
        if vocabulary:
            unknown = unknown_skills(tokens, vocabulary)
            if unknown:
                raise ValueError(f"unknown skills: {', '.join(unknown)}")
        return tokens


def _vocabulary_for(flask_app) -> Optional[dict]:
    if flask_app.config.get("ENFORCE_SKILL_VOCABULARY"):
        return flask_app.config.get("SKILL_OPTIONS")
    return None


def validate_employee(payload: dict, current_id: Optional[int] = None, skill_vocabulary: Optional[dict] = None) -> dict:
    """
    Validate + normalize an employee field set.

    Raises pydantic.ValidationError for field errors and DuplicateEmail when
    the email belongs to another row (deleted rows included). current_id is
    the employee being updated, excluded from the uniqueness check.
    """
    context = {"skill_vocabulary": skill_vocabulary} if skill_vocabulary else None
    validated = EmployeeSchema.model_validate(payload, context=context).model_dump()

    if employee_store.email_in_use(validated["email"], exclude_id=current_id):
        raise DuplicateEmail()
    return validated


def _find_live(employee_id: int) -> Employee:
    employee = employee_store.find_by_id(employee_id)
    if employee.is_deleted:
        raise EmployeeNotFound()
    return employee


# ---- Handlers ----
def list_active_employees() -> List[Employee]:
    return employee_store.list_employees()


def get_employee(employee_id: int) -> Employee:
    """Live (not soft-deleted) employee, for the edit form."""
    return _find_live(employee_id)


def create_employee(payload: dict, flask_app) -> Employee:
    """
    Validates payload and inserts a new active employee.
    May raise pydantic.ValidationError or DuplicateEmail.
    """
    validated = validate_employee(payload, skill_vocabulary=_vocabulary_for(flask_app))
    # the store still raises DuplicateEmail if a concurrent create wins the race
    employee = employee_store.create_employee(validated)
    flask_app.logger.info("Employee %s created (email=%s)", employee.id, employee.email)
    return employee


def update_employee(employee_id: int, payload: dict, flask_app) -> Employee:
    """
    Overwrites the editable fields of a live employee.
    May raise EmployeeNotFound, pydantic.ValidationError or DuplicateEmail.
    """
    employee = _find_live(employee_id)
    validated = validate_employee(
        payload,
        current_id=employee.id,
        skill_vocabulary=_vocabulary_for(flask_app),
    )
    employee = employee_store.update_employee(employee.id, validated)
    flask_app.logger.info("Employee %s updated", employee.id)
    return employee


def delete_employee(employee_id: int, flask_app) -> Employee:
    """
    Soft-deletes a live employee. A second delete of the same id raises
    EmployeeNotFound: deleted rows are not live.
    """
    employee = _find_live(employee_id)
    employee = employee_store.soft_delete_employee(employee.id)
    flask_app.logger.info("Employee %s soft-deleted", employee.id)
    return employee
