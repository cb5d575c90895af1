"""Byte buffers, LED matrix drawing, pixel fonts, AW9523 and IS31FL3731 drivers over a supplied I2C bus, and piezo chirp playback."""

__version__ = "0.1.0"