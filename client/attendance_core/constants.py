"""
Constants, timeouts, storage keys and fixed user-facing messages.
"""

CLIENT_VERSION = "1.0.0"

# ─── Network ─────────────────────────────────────────────────────
DEFAULT_SERVER_URL = "http://127.0.0.1:3000/api"
API_TIMEOUT = 15               # Seconds per request (transport default otherwise)
POOL_MAXSIZE = 4               # A few screens may call at once

# ─── Face recognition ────────────────────────────────────────────
RECOGNITION_DELAY_SEC = 2.0    # Simulated processing time of the recognizer
PLACEHOLDER_FACE_DATA = "processed_face_data"
DEFAULT_LOCATION = {"latitude": 0, "longitude": 0}

# ─── Session storage keys ────────────────────────────────────────
SESSION_FILE_NAME = "session.json"
KEY_TOKEN = "userToken"
KEY_ROLE = "userRole"
KEY_PROFILE = "userInfo"
SESSION_KEYS = (KEY_TOKEN, KEY_ROLE, KEY_PROFILE)

# ─── Validation ──────────────────────────────────────────────────
MIN_PASSWORD_LENGTH = 8

# ─── Messages ────────────────────────────────────────────────────
MSG_CONNECTION_FAILED = "Connection failed. Please check your network and server."
MSG_INVALID_RESPONSE = "Invalid response from server"
MSG_INVALID_LOGIN_RESPONSE = "Invalid login response"
MSG_PERMISSION_REQUIRED = "Camera permission is required for face recognition"
MSG_SELECT_COURSE = "Please select a course first"
MSG_FILL_ALL_FIELDS = "Please fill all fields"
MSG_PASSWORD_TOO_SHORT = f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
MSG_ENTER_STUDENT_ID = "Please enter student ID"
MSG_CAPTURE_PHOTO_FIRST = "Please capture a photo first"
