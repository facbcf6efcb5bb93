from typing import Optional
from pydantic import BaseModel, field_validator

class ServiceProviderConfig(BaseModel):
    """
    Geschäftsangaben des rechnungsstellenden Unternehmens.
    Fehlende Angaben bleiben None und werden in der Rechnung als Platzhalter ausgegeben.
    """
    name: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None

    @field_validator("name", "street", "city", "state", "zip_code", mode="before")
    def ensure_str(cls, v):
        """
        Sorgt dafür, dass z.B. eine numerische PLZ aus der YAML-Datei als str vorliegt.
        """
        return None if v is None else str(v)

    def is_complete(self) -> bool:
        """
        Prüft, ob alle Felder für die Anschrift gesetzt sind.
        """
        return all([self.name, self.street, self.city, self.state, self.zip_code])
