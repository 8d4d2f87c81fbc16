"""
Face recognition capability used by the capture workflow.

A recognizer exposes `async capture() -> str`, returning the token that is
submitted as `faceData`. Matching itself happens elsewhere; the shipped
recognizer only simulates the processing time.
"""

import asyncio

from .constants import RECOGNITION_DELAY_SEC, PLACEHOLDER_FACE_DATA


class SimulatedRecognizer:
    def __init__(self, delay=RECOGNITION_DELAY_SEC, payload=PLACEHOLDER_FACE_DATA):
        self.delay = delay
        self.payload = payload

    async def capture(self) -> str:
        await asyncio.sleep(max(self.delay, 0))
        return self.payload
