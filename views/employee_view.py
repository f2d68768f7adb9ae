# views/employee_view.py
"""
View models for the employee page.

The page only ever sees what the list handler returns plus the skill
vocabulary. Stored skills are decoded here for display and for pre-filling
the edit form; the form posts the selected tokens back as repeated `skills`
fields, which the controller validates and the store re-encodes.
"""
from typing import Iterable, List, Mapping, Optional

from models.employee import Employee
from utils.skills import skill_label


def employee_row(employee: Employee, vocabulary: Mapping[str, str]) -> dict:
    row = employee.to_dict()
    row["skill_labels"] = [skill_label(s, vocabulary) for s in row["skills"]]
    return row


def skill_choices(vocabulary: Mapping[str, str], selected: Iterable[str] = ()) -> List[dict]:
    """
    Options for the skills multi-select. Selected tokens missing from the
    vocabulary are appended so editing never silently drops them.
    """
    selected = list(selected)
    choices = [
        {"value": token, "label": label, "selected": token in selected}
        for token, label in vocabulary.items()
    ]
    for token in selected:
        if token not in vocabulary:
            choices.append({"value": token, "label": token, "selected": True})
    return choices


def index_context(employees: Iterable[Employee], vocabulary: Mapping[str, str], editing: Optional[Employee] = None) -> dict:
    selected = editing.skill_list if editing is not None else []
    return {
        "employees": [employee_row(e, vocabulary) for e in employees],
        "editing": employee_row(editing, vocabulary) if editing is not None else None,
        "form_action": f"/update/{editing.id}" if editing is not None else "/store",
        "skill_choices": skill_choices(vocabulary, selected),
    }
