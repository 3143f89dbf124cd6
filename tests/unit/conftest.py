import os

# handlers モジュールの import 時に生成される Engine を in-memory に向ける
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CONFIRMATION_API_URL"] = "https://confirm.example.com/confirmBooking"
