import os

OUTPUT_DIR = os.getenv("API_TYPEGEN_OUTPUT_DIR", "schemas")
REQUEST_TIMEOUT = float(os.getenv("API_TYPEGEN_TIMEOUT", "30"))
