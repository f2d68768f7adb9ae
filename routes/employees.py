# routes/employees.py
from flask import Blueprint, request, jsonify, current_app, flash, redirect, render_template, url_for
from pydantic import ValidationError

from controllers import employee_controller
from utils.errors import EmployeeError, EmployeeNotFound, StoreUnavailable
from views.employee_view import index_context

bp = Blueprint("employees", __name__)

FIELDS = ("name", "email", "mobile_no")


def _wants_json() -> bool:
    return request.is_json or request.accept_mimetypes.best == "application/json"


def _read_payload():
    """
    Field set from either a JSON body or a form post. Form posts send skills
    as repeated `skills` (or `skills[]`) keys. Returns None for broken JSON.
    """
    if request.is_json:
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            return None
        if "skills" not in payload and "skills[]" in payload:
            payload["skills"] = payload.pop("skills[]")
        return payload

    form = request.form
    payload = {k: form.get(k) for k in FIELDS if k in form}
    skills = form.getlist("skills") or form.getlist("skills[]")
    if skills:
        payload["skills"] = skills
    return payload


def _error_messages(ve: ValidationError):
    messages = []
    for err in ve.errors(include_url=False):
        field = ".".join(str(p) for p in err["loc"]) or "payload"
        messages.append(f"{field}: {err['msg']}")
    return messages


def _render_index(editing=None, status=200):
    vocabulary = current_app.config["SKILL_OPTIONS"]
    employees = employee_controller.list_active_employees()
    return render_template("employees/index.html", **index_context(employees, vocabulary, editing)), status


def _failure(message, status, back_to=None):
    """Error response: JSON detail for API callers, flash + redirect for the form."""
    if _wants_json():
        return jsonify({"detail": message}), status
    flash(message, "danger")
    if status == 404:
        try:
            return _render_index(status=404)
        except Exception:
            current_app.logger.exception("Employee list failed while rendering a 404")
            return message, status
    return redirect(back_to or url_for("employees.index"))


def _handle(action, success_message, success_status=200, back_to=None):
    """
    Runs one mutating handler and converts its outcome into a response.
    On success the caller is sent back to the list, which it re-fetches.
    """
    try:
        employee = action()
    except ValidationError as ve:
        current_app.logger.warning("Employee validation failed: %s", ve.errors(include_url=False, include_context=False))
        if _wants_json():
            return jsonify({"detail": ve.errors(include_url=False, include_context=False)}), 422
        for message in _error_messages(ve):
            flash(message, "danger")
        return redirect(back_to or url_for("employees.index"))
    except StoreUnavailable as e:
        current_app.logger.exception("Employee store unavailable")
        if _wants_json():
            return jsonify({"detail": e.message}), e.status_code
        return e.message, e.status_code
    except EmployeeError as e:
        current_app.logger.warning("Employee request rejected: %s", e.message)
        return _failure(e.message, e.status_code, back_to=back_to)
    except Exception:
        current_app.logger.exception("Employee request failed")
        return _failure("Employee request failed", 500, back_to=back_to)

    if _wants_json():
        return jsonify({"employee": employee.to_dict(), "message": success_message}), success_status
    flash(success_message, "success")
    return redirect(url_for("employees.index"))


def _read_failure(e):
    """Read routes: store outage -> 503, anything else -> 500. Never re-raises."""
    if isinstance(e, StoreUnavailable):
        current_app.logger.exception("Employee store unavailable")
        message, status = e.message, e.status_code
    else:
        current_app.logger.exception("Employee read failed")
        message, status = "Employee request failed", 500
    if _wants_json():
        return jsonify({"detail": message}), status
    return message, status


@bp.route("/", methods=["GET"])
def index():
    try:
        if _wants_json():
            employees = employee_controller.list_active_employees()
            return jsonify({"employees": [e.to_dict() for e in employees]})
        return _render_index()
    except Exception as e:
        return _read_failure(e)


@bp.route("/edit/<int:employee_id>", methods=["GET"])
def edit(employee_id):
    try:
        employee = employee_controller.get_employee(employee_id)
        if _wants_json():
            return jsonify({"employee": employee.to_dict()})
        return _render_index(editing=employee)
    except EmployeeNotFound as e:
        return _failure(e.message, e.status_code)
    except Exception as e:
        return _read_failure(e)


@bp.route("/store", methods=["POST"])
def store():
    payload = _read_payload()
    if payload is None:
        return jsonify({"detail": "Invalid JSON"}), 400

    return _handle(
        lambda: employee_controller.create_employee(payload, current_app),
        "Employee created successfully!",
        success_status=201,
    )


@bp.route("/update/<int:employee_id>", methods=["POST"])
def update(employee_id):
    payload = _read_payload()
    if payload is None:
        return jsonify({"detail": "Invalid JSON"}), 400

    return _handle(
        lambda: employee_controller.update_employee(employee_id, payload, current_app),
        "Employee updated successfully!",
        back_to=url_for("employees.edit", employee_id=employee_id),
    )


@bp.route("/delete/<int:employee_id>", methods=["POST"])
def delete(employee_id):
    return _handle(
        lambda: employee_controller.delete_employee(employee_id, current_app),
        "Employee deleted successfully!",
    )
