# main.py

# load_dotenv harus jalan sebelum app.config membaca environment
from dotenv import load_dotenv
load_dotenv(override=True)

from app import create_app

# Uvicorn memanggil factory ini kalau dijalankan dengan factory=True
app = create_app
