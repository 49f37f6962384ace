from .settings import Settings, UNKNOWN_AUTHOR, UNKNOWN_DATE
