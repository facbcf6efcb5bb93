from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator

from .state_code import StateCode
from .utils import safe_str  # Nutze zentrale Hilfsfunktion für String-Konvertierung


class Address(BaseModel):
    """
    Postanschrift mit Strasse, Ort, Bundesstaat und Postleitzahl.
    Ein unbekanntes Staatskürzel lässt bereits den Aufbau der Adresse scheitern.
    """
    model_config = ConfigDict(frozen=True)

    street: str
    city: str
    state: StateCode
    zip_code: str

    @model_validator(mode="before")
    def ensure_str_fields(cls, data):
        """
        Sorgt dafür, dass alle string-Felder wirklich als str vorliegen.
        Das verhindert Validierungsfehler, wenn z.B. die PLZ als int aus der Config kommt.
        """
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for field in ["street", "city", "zip_code"]:
            if field in data and data[field] is not None:
                data[field] = safe_str(data[field])
        if isinstance(data.get("state"), str):
            data["state"] = data["state"].strip().upper()
        return data

    def __str__(self) -> str:
        return f"{self.street}\n{self.city}, {self.state} {self.zip_code}"


class PersonalName(BaseModel):
    """
    Name einer Person (z.B. Berater oder Kontaktperson eines Kunden).
    """
    model_config = ConfigDict(frozen=True)

    last_name: str = ""
    first_name: str = ""
    middle_name: str = ""

    def __str__(self) -> str:
        given = f"{self.first_name} {self.middle_name}".strip()
        return f"{self.last_name}, {given}".strip(", ")


class Consultant(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: PersonalName

    def __str__(self) -> str:
        return str(self.name)


class ClientAccount(BaseModel):
    """
    Kunde, an den Rechnungen gestellt werden. Kundenkonten sind immer verrechenbar.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    address: Address
    contact: PersonalName

    @property
    def is_billable(self) -> bool:
        return True

    def __str__(self) -> str:
        return self.name


class NonBillableAccount(str, Enum):
    """
    Interne, nicht verrechenbare Konten wie Krankheit, Ferien oder Akquise.
    Der Anzeigename steht im value.
    """
    SICK_LEAVE = "Sick Leave"
    VACATION = "Vacation"
    BUSINESS_DEVELOPMENT = "Business Development"

    @property
    def is_billable(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.value
