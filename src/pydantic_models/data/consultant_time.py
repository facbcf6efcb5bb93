import datetime
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from pydantic_models.data.skill import Skill
from shared_modules.entity import ClientAccount, NonBillableAccount


class ConsultantTime(BaseModel):
    """
    Einzelne Zeiterfassung eines Beraters: Datum, Konto, Fähigkeit und Stunden.
    Nach dem Erzeugen unveränderlich.
    """
    model_config = ConfigDict(frozen=True)

    date: datetime.date
    account: Union[ClientAccount, NonBillableAccount]
    skill: Skill
    hours: int = Field(ge=0)

    @property
    def is_billable(self) -> bool:
        return self.account.is_billable

    @property
    def client_name(self) -> str:
        """
        Name des Kontos, bei nicht verrechenbaren Konten der Anzeigename.
        """
        return str(self.account)
