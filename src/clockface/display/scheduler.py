# src/clockface/display/scheduler.py

import logging
import threading
import time


class FrameScheduler:
    """
    Runs `render_frame` on a background thread whenever a redraw is due.

    Frames are requested the way a UI toolkit does it: `post_invalidate_delayed`
    asks for a frame after a delay, `invalidate` asks for one right away.
    Pending requests coalesce; the earliest deadline wins and one frame is
    rendered per wake-up. The first frame is drawn as soon as `start()` runs.
    """

    def __init__(self, render_frame, clock=time.monotonic, retry_delay_ms=1000):
        self.render_frame = render_frame
        self._clock = clock
        self.retry_delay_ms = retry_delay_ms

        self.logger = logging.getLogger(self.__class__.__name__)

        self._cond = threading.Condition()
        self._deadline = None
        self._thread = None
        self._stop_event = threading.Event()
        self.frames_rendered = 0
        self.frames_failed = 0

    @property
    def is_running(self):
        return self._thread is not None and self._thread.is_alive()

    def post_invalidate_delayed(self, delay_ms):
        """Request a frame `delay_ms` milliseconds from now."""
        self._request(self._clock() + max(delay_ms, 0) / 1000.0)

    def invalidate(self):
        """Request a frame as soon as possible."""
        self._request(self._clock())

    @property
    def pending_deadline(self):
        with self._cond:
            return self._deadline

    def start(self):
        if self.is_running:
            return
        self._stop_event.clear()
        self.invalidate()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()
        self.logger.info("FrameScheduler started.")

    def stop(self):
        if self._thread is None:
            return
        self._stop_event.set()
        with self._cond:
            self._deadline = None
            self._cond.notify_all()
        if self._thread is not threading.current_thread():
            self._thread.join()
        self._thread = None
        self.logger.info(f"FrameScheduler stopped after {self.frames_rendered} frames ({self.frames_failed} failed).")

    def _request(self, deadline):
        with self._cond:
            if self._deadline is None or deadline < self._deadline:
                self._deadline = deadline
                self._cond.notify_all()

    def _wait_for_frame(self):
        """Block until a frame is due; False once stop() has been called."""
        with self._cond:
            while not self._stop_event.is_set():
                if self._deadline is None:
                    self._cond.wait()
                    continue
                remaining = self._deadline - self._clock()
                if remaining <= 0:
                    self._deadline = None
                    return True
                self._cond.wait(remaining)
        return False

    def _run(self):
        while self._wait_for_frame():
            try:
                self.render_frame()
            except Exception as e:
                self.frames_failed += 1
                # A broken frame must not kill the loop; the next request still runs
                self.logger.error(f"Frame render failed: {e}", exc_info=True)
                if self.pending_deadline is None:
                    self.post_invalidate_delayed(self.retry_delay_ms)
            else:
                self.frames_rendered += 1
