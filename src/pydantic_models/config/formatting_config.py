from pydantic import BaseModel

class FormattingConfig(BaseModel):
    """
    Formatierungsangaben für die Textrechnung (Babel-Patterns).
    Die Patterns sind Pflicht, damit Beträge immer mit zwei Nachkommastellen erscheinen.
    """
    locale: str = "en_US"
    numeric_format: str = "#,##0.00"
    date_format: str = "MM/dd/yyyy"
    month_format: str = "MMMM yyyy"
    long_date_format: str = "MMMM dd, yyyy"
