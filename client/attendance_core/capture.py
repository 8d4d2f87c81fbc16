"""
AttendanceCaptureMachine — the mark-attendance workflow as explicit phases.

    SELECTING_COURSE ─start()─▶ AWAITING_PERMISSION ─granted─▶ CAMERA_READY
                                        │ denied                  │ begin_scan()
                                        ▼                         ▼
                                     FAILED ◀──failure── SUBMITTING ◀─capture()─ SCANNING
                                                             │ success            │ cancel()
                                                             ▼                    ▼
                                                         SUCCEEDED         SELECTING_COURSE

acknowledge() leaves SUCCEEDED/FAILED. After a submission failure it goes back
to CAMERA_READY with the course kept; otherwise the attempt is reset.

Single-flight: capture() while SUBMITTING is ignored, so one machine never has
two attendance requests outstanding. All mutations happen on the event loop;
no locks needed.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .config import log
from .constants import (
    DEFAULT_LOCATION, MSG_PERMISSION_REQUIRED, MSG_SELECT_COURSE, MSG_INVALID_RESPONSE,
)
from .envelope import Success
from .errors import ValidationError, InvalidTransition
from .recognition import SimulatedRecognizer

ATTENDANCE_ENDPOINT = "/student/attendance"


class Phase(Enum):
    SELECTING_COURSE = "selecting course"
    AWAITING_PERMISSION = "awaiting permission"
    CAMERA_READY = "camera ready"
    SCANNING = "scanning"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class AttendanceResult:
    status: str
    course_code: str
    is_late: bool = False
    late_minutes: int = 0

    @classmethod
    def from_data(cls, data, fallback_course=None):
        return cls(
            status=data.get("status", ""),
            course_code=data.get("courseCode") or fallback_course or "",
            is_late=bool(data.get("isLate")),
            late_minutes=data.get("lateMinutes") or 0,
        )

    @property
    def summary(self) -> str:
        text = f"Successfully marked {self.status} for {self.course_code}"
        if self.is_late:
            text += f" ({self.late_minutes} minutes late)"
        return text


class AttendanceCaptureMachine:
    """
    Drives one student's attendance attempt.

    `request_permission` is an async callable returning True when the camera
    may be used. `recognizer` provides `async capture() -> faceData`.
    """

    def __init__(self, client, request_permission, recognizer=None, location=None):
        self._client = client
        self._request_permission = request_permission
        self._recognizer = recognizer or SimulatedRecognizer()
        self._location = dict(location or DEFAULT_LOCATION)

        self.phase = Phase.SELECTING_COURSE
        self.course_code: Optional[str] = None
        self.last_error: Optional[str] = None
        self.result: Optional[AttendanceResult] = None

        self._retry_phase = Phase.SELECTING_COURSE   # where acknowledge() goes from FAILED
        self._attempt = 0                            # bumped on every reset

    # ── Derived view state ────────────────────────────────────

    @property
    def camera_visible(self) -> bool:
        return self.phase in (Phase.CAMERA_READY, Phase.SCANNING, Phase.SUBMITTING)

    @property
    def scanning(self) -> bool:
        return self.phase is Phase.SCANNING

    @property
    def matching(self) -> bool:
        return self.phase is Phase.SUBMITTING

    @property
    def summary(self) -> Optional[str]:
        return self.result.summary if self.result else None

    # ── Helpers ───────────────────────────────────────────────

    def _require(self, action, *phases):
        if self.phase not in phases:
            raise InvalidTransition(action, self.phase)

    def _fail(self, message, retry_phase):
        self.phase = Phase.FAILED
        self.last_error = message
        self._retry_phase = retry_phase
        log.warning("Attendance attempt failed (%s): %s", self.course_code, message)

    def reset(self):
        """Discard the attempt. Used on cancel, on completion and when leaving the screen."""
        self._attempt += 1
        self.phase = Phase.SELECTING_COURSE
        self.course_code = None
        self.last_error = None
        self.result = None
        self._retry_phase = Phase.SELECTING_COURSE

    # ── Transitions ───────────────────────────────────────────

    def select_course(self, code):
        self._require("select a course", Phase.SELECTING_COURSE)
        self.course_code = (code or "").strip() or None

    async def start(self):
        self._require("start", Phase.SELECTING_COURSE)
        if not self.course_code:
            raise ValidationError(MSG_SELECT_COURSE)

        self.phase = Phase.AWAITING_PERMISSION
        self.last_error = None
        attempt = self._attempt
        try:
            granted = await self._request_permission()
        except Exception as e:
            log.warning("Camera permission prompt failed: %s", e)
            granted = False

        if attempt != self._attempt:
            return self.phase
        if granted:
            self.phase = Phase.CAMERA_READY
            log.info("Camera ready for %s", self.course_code)
        else:
            self._fail(MSG_PERMISSION_REQUIRED, Phase.SELECTING_COURSE)
        return self.phase

    def begin_scan(self):
        self._require("begin scanning", Phase.CAMERA_READY)
        self.phase = Phase.SCANNING

    def cancel(self):
        self._require("cancel", Phase.CAMERA_READY, Phase.SCANNING)
        log.info("Attendance scan cancelled (%s)", self.course_code)
        self.reset()

    async def capture(self):
        """Recognize the face and submit attendance.

        Returns the final phase, or None when a submission is already running.
        """
        if self.phase is Phase.SUBMITTING:
            log.debug("Capture ignored: submission already in flight")
            return None
        self._require("capture", Phase.SCANNING)

        self.phase = Phase.SUBMITTING
        attempt = self._attempt
        course_code = self.course_code

        try:
            face_data = await self._recognizer.capture()
        except Exception as e:
            if attempt == self._attempt:
                self._fail(str(e) or "Face recognition failed", Phase.CAMERA_READY)
            return self.phase

        if attempt != self._attempt:
            return self.phase

        try:
            envelope = await self._client.call(
                ATTENDANCE_ENDPOINT,
                "POST",
                {"courseCode": course_code, "faceData": face_data, "location": self._location},
            )
        except Exception as e:
            log.error("Attendance submission error: %s", e, exc_info=True)
            if attempt == self._attempt:
                self._fail(str(e) or "Attendance submission failed", Phase.CAMERA_READY)
            return self.phase

        if attempt != self._attempt:
            log.info("Discarding attendance response for a reset attempt (%s)", course_code)
            return self.phase

        if isinstance(envelope, Success):
            if not isinstance(envelope.data, dict):
                self._fail(MSG_INVALID_RESPONSE, Phase.CAMERA_READY)
                return self.phase
            self.result = AttendanceResult.from_data(envelope.data, course_code)
            self.phase = Phase.SUCCEEDED
            log.info("Attendance recorded: %s", self.result.summary)
        else:
            self._fail(envelope.message, Phase.CAMERA_READY)
        return self.phase

    def acknowledge(self):
        self._require("acknowledge", Phase.SUCCEEDED, Phase.FAILED)
        if self.phase is Phase.FAILED and self._retry_phase is Phase.CAMERA_READY:
            self.phase = Phase.CAMERA_READY
            self.last_error = None
            return
        self.reset()
