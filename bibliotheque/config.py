import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass
class Settings:
    # Persistence
    data_file: str = os.getenv("LIBRARY_DATA_FILE", "bibliotheque.json")

    # List screens
    page_size: int = int(os.getenv("LIST_PAGE_SIZE", "10"))
    visible_lines: int = int(os.getenv("LIST_VISIBLE_LINES", "15"))

    # Logging (the terminal belongs to the UI, so logs go to a file)
    log_file: str = os.getenv("LOG_FILE", "bibliotheque.log")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Application
    app_name: str = os.getenv("APP_NAME", "Bibliothèque")
    debug: bool = os.getenv("DEBUG", "False").lower() in ("true", "1", "yes")


settings = Settings()
