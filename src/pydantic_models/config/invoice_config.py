from pydantic import BaseModel, Field

class InvoiceConfig(BaseModel):
    max_items_per_page: int = Field(default=5, gt=0)   # Positionen pro Seite
