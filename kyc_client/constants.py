from __future__ import annotations

# Single source of truth for endpoint paths and transport defaults.

START_SESSION_PATH = "/kyc/start-session"
GET_DATA_PATH = "/kyc/get-data"
GET_STATUS_PATH = "/kyc/get-status"

DEFAULT_BASE_URL = "https://api.ondato.com"
DEFAULT_TIMEOUT_SECONDS = 30.0

# Status code the service uses to report rejected request fields.
WRONG_FIELDS_STATUS_CODE = 400
