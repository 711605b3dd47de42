from .base import CamelModel


class DepartmentOut(CamelModel):
    name: str
    sub_departments: list[str]
