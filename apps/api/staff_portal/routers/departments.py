from fastapi import APIRouter

from ..core.departments import SUB_DEPARTMENTS
from ..schemas.department import DepartmentOut

router = APIRouter(prefix="/departments", tags=["departments"])


@router.get("", response_model=list[DepartmentOut])
def list_departments():
    return [DepartmentOut(name=name, sub_departments=subs) for name, subs in SUB_DEPARTMENTS.items()]
