"""
Domain models for Student Records.

Defines the student record schema shared by the store, the reporter and the
demo. The model is a plain data holder: fields are read and assigned as
attributes and nothing about their values is checked.
"""
from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

LABEL_WIDTH = 8


class StudentRecord(BaseModel):
    """
    One student's stored attributes.

    `StudentRecord()` yields the zero-value record (zeros and empty strings).
    """

    id: int = Field(0, description="Identifier, intended unique but not enforced.")
    name: str = Field("", description="Student name.")
    age: int = Field(0, description="Age in years.")
    course: str = Field("", description="Course code, e.g. CSE.")
    marks: int = Field(0, description="Marks, intended range 0-100.")
    email: str = Field("", description="Contact email address.")

    model_config = {
        "frozen": False,
        "validate_assignment": False,
    }

    @classmethod
    def of(
        cls, id: int, name: str, age: int, course: str, marks: int, email: str
    ) -> "StudentRecord":
        """Positional constructor taking all six attributes in declaration order."""
        return cls(id=id, name=name, age=age, course=course, marks=marks, email=email)

    def summary(self) -> List[str]:
        """Labelled field lines used by the plain listing."""
        fields = [
            ("Id", self.id),
            ("Name", self.name),
            ("Age", self.age),
            ("Course", self.course),
            ("Marks", self.marks),
            ("Email", self.email),
        ]
        return [f"{label:<{LABEL_WIDTH}}: {value}" for label, value in fields]


__all__ = ["StudentRecord"]
