from pydantic import BaseModel, ConfigDict
from typing import Optional

class EmployeeCreate(BaseModel):
    # Field rules live in services.validators so that every offending field
    # is reported at once. Unknown keys, including "id", are dropped.
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

class EmployeeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    phone: str
