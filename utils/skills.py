# utils/skills.py
"""
Storage representation of an employee's skills.

Skills are persisted as a JSON array of strings in a text column. Everything
that reads or writes that column goes through encode_skills / decode_skills so
the representation can change in one place.
"""
import json
from typing import Iterable, List, Mapping


def encode_skills(skills: Iterable[str]) -> str:
    """Serialize an ordered sequence of skill tokens for storage."""
    return json.dumps([str(s) for s in skills], ensure_ascii=False)


def decode_skills(raw) -> List[str]:
    """
    Deserialize the stored column back into the ordered token list.
    Empty / NULL columns decode to an empty list.
    """
    if raw is None or raw == "":
        return []
    value = json.loads(raw)
    if not isinstance(value, list):
        raise ValueError(f"skills column must hold a JSON array, got {type(value).__name__}")
    return [str(s) for s in value]


def skill_label(token: str, vocabulary: Mapping[str, str]) -> str:
    # unknown tokens are shown as-is
    return vocabulary.get(token, token)


def unknown_skills(skills: Iterable[str], vocabulary: Mapping[str, str]) -> List[str]:
    return [s for s in skills if s not in vocabulary]
