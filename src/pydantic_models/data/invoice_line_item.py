import datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field

from pydantic_models.data.skill import Skill
from shared_modules.entity import Consultant


class InvoiceLineItem(BaseModel):
    """
    Rechnungsposition aus einer verrechenbaren Zeiterfassung.
    Der Betrag ergibt sich aus Stunden mal Stundensatz der Fähigkeit.
    """
    model_config = ConfigDict(frozen=True)

    date: datetime.date
    consultant: Consultant
    skill: Skill
    hours: int = Field(ge=0)

    @computed_field
    @property
    def charge(self) -> float:
        return self.hours * self.skill.rate
