"""
Server API calls used by the dashboard, course and notification screens.

Each function takes a RequestClient and returns its Envelope unchanged;
screens branch on `ok` and show `message` on failure.
"""

from urllib.parse import quote, urlencode

from .constants import MSG_CAPTURE_PHOTO_FIRST
from .errors import ValidationError


# ─── Student ─────────────────────────────────────────────────────

async def fetch_student_courses(client):
    """Courses the student is enrolled in: [{courseCode, courseName}, ...]."""
    return await client.call("/student/courses")


async def fetch_student_dashboard(client):
    return await client.call("/student/dashboard")


async def fetch_student_materials(client):
    return await client.call("/student/materials")


async def fetch_face_status(client):
    return await client.call("/student/face/status")


async def register_face(client, image_base64):
    """Upload a base64-encoded photo as the student's reference face."""
    if not image_base64:
        raise ValidationError(MSG_CAPTURE_PHOTO_FIRST)
    return await client.call("/student/face/register-image", "POST", {"imageBase64": image_base64})


# ─── Notifications ───────────────────────────────────────────────

async def fetch_notifications(client):
    return await client.call("/notifications")


async def mark_notification_read(client, notification_id):
    return await client.call(f"/notifications/{quote(str(notification_id), safe='')}/read", "PUT")


# ─── Admin ───────────────────────────────────────────────────────

async def fetch_admin_courses(client):
    return await client.call("/admin/courses")


async def fetch_admin_analytics(client, course_code=None):
    endpoint = "/admin/analytics"
    if course_code:
        endpoint += "?" + urlencode({"courseCode": course_code})
    return await client.call(endpoint)
