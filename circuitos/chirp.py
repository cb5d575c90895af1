"""Frequency-sweep sound effects played on a piezo buzzer from a background thread."""

from __future__ import annotations

import threading
import time
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class Chirp:
    """A sweep from start_freq to end_freq (Hz) over duration milliseconds."""

    start_freq: int
    end_freq: int
    duration: int

    def __post_init__(self) -> None:
        for name in ("start_freq", "end_freq"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFFFF:
                raise ValueError(f"{name} must be within 0-65535, got {value}")
        if self.duration < 0:
            raise ValueError(f"duration must not be negative, got {self.duration}")

    def frequency_at(self, elapsed: float) -> int:
        """Frequency after `elapsed` ms, interpolated linearly and clamped to the sweep."""
        if self.duration == 0:
            return self.end_freq
        elapsed = int(min(max(elapsed, 0), self.duration))
        span = (self.end_freq - self.start_freq) * elapsed
        step = abs(span) // self.duration
        return self.start_freq + (step if span >= 0 else -step)


class Piezo:
    """A buzzer's state; an optional listener is told each new frequency (0 for silence)."""

    def __init__(self, listener: Callable[[int], None] | None = None) -> None:
        self._listener = listener
        self._volume = 5
        self.muted = False
        self._frequency = 0
        self.tone_duration = 0

    @property
    def frequency(self) -> int:
        """The frequency sounding now, 0 when silent."""
        return self._frequency

    @property
    def volume(self) -> int:
        return self._volume

    @volume.setter
    def volume(self, value: int) -> None:
        if not 0 <= value <= 255:
            raise ValueError(f"volume must be within 0-255, got {value}")
        self._volume = value

    def tone(self, freq: int, duration: int = 0) -> None:
        """Sound `freq` Hz; a duration of 0 means until stopped."""
        if not 0 <= freq <= 0xFFFF:
            raise ValueError(f"frequency must be within 0-65535, got {freq}")
        self._frequency = 0 if self.muted else freq
        self.tone_duration = duration
        self._notify()

    def no_tone(self) -> None:
        self._frequency = 0
        self.tone_duration = 0
        self._notify()

    def _notify(self) -> None:
        if self._listener is not None:
            self._listener(self._frequency)


def _millis() -> float:
    return time.monotonic() * 1000.0


class ChirpSystem:
    """Plays sounds made of chirps; a new sound interrupts the one playing."""

    def __init__(self, piezo: Piezo) -> None:
        self._piezo = piezo
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._running = False
        self._current: list[Chirp] = []
        self._queued: list[Chirp] = []
        self._index = 0
        self._start = 0.0

    @property
    def running(self) -> bool:
        with self._lock:
            return self._running

    def play(self, sound: Iterable[Chirp]) -> None:
        """Play `sound`, replacing whatever is playing."""
        chirps = list(sound)
        with self._lock:
            if self._running:
                self._queued = chirps
                return
            self._current = chirps
            self._queued = []
            self._index = 0
            self._start = _millis()
            self._running = True
            self._stop_event.clear()
            self._thread = threading.Thread(target=self._playback, name="ChirpSystem", daemon=True)
            self._thread.start()

    def stop(self) -> None:
        """Stop playback at once and silence the buzzer."""
        self._stop_event.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        with self._lock:
            self._queued = []
            self._running = False
        self._piezo.no_tone()

    def wait(self, timeout: float | None = None) -> bool:
        """Wait for playback to finish; return whether it has."""
        thread = self._thread
        if thread is not None:
            thread.join(timeout)
            return not thread.is_alive()
        return True

    def _playback(self) -> None:
        while not self._stop_event.is_set():
            with self._lock:
                if self._queued:
                    self._current = self._queued
                    self._queued = []
                    self._index = 0
                    self._start = _millis()
                if self._index >= len(self._current):
                    self._piezo.no_tone()
                    self._running = False
                    return
                chirp = self._current[self._index]
                start = self._start

            elapsed = _millis() - start
            freq = chirp.frequency_at(elapsed)
            self._piezo.tone(freq, 0)
            pause = 3 + (1000 // freq if freq else 0)
            if self._stop_event.wait(pause / 1000.0):
                return

            if chirp.duration > elapsed:
                continue

            with self._lock:
                self._start = _millis()
                self._index += 1
                if self._index >= len(self._current):
                    self._current = self._queued
                    self._queued = []
                    self._index = 0