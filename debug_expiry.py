import datetime
from utils.expiry_calculator import weekday_code, days_until_next_friday
from core.expiration_reporter import build_expiration_table

today = datetime.date.today()
result = days_until_next_friday(weekday_code(today))
print(f"Today: {today}")
print(f"Weekday Code: {weekday_code(today)} (1=Sun, 2=Mon, ... 7=Sat)")
if result.ok:
    print(f"Days Until Friday: {result.offset}")
    print(build_expiration_table(today).to_string(index=False))
else:
    print(f"Weekday Lookup Failed: {result.error.message}")
