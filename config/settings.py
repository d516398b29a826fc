import os
from dotenv import load_dotenv

# Load overrides from .env file
load_dotenv()

class Config:
    LOG_DIR = os.getenv("LOG_DIR", "logs")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Expiration Schedule
    EXPIRATION_COUNT = 20
    EXPIRATION_STRIDE_DAYS = 7
    # Weekday code (Sunday = 1 ... Saturday = 7), Friday = 6
    EXPIRATION_WEEKDAY_CODE = 6
    # Standard monthly expirations fall on day 15 - 20 (third Friday)
    MONTHLY_WINDOW = (15, 20)

    # Exit status when the weekday lookup fails
    ERROR_EXIT_CODE = 1
