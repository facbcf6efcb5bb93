from typing import Optional
from pydantic import BaseModel

class LoggingConfig(BaseModel):
    log_file: Optional[str] = None                  # Ohne Logdatei nur Konsole
    log_level: Optional[str] = "INFO"               # Defaultwert
