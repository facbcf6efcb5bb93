from .config import Config, business_identity_from, load_business_identity, try_load_config
