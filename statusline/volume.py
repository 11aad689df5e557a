"""Master volume from an OSS mixer device."""

from __future__ import annotations

import fcntl
import os
import struct

from .util import warn

SOUND_DEVICE_NAMES = (
    "vol", "bass", "treble", "synth", "pcm", "speaker", "line", "mic",
    "cd", "mix", "pcm2", "rec", "igain", "ogain", "line1", "line2",
    "line3", "dig1", "dig2", "dig3", "phin", "phout", "video", "radio",
    "monitor",
)

_MIXER_READ_BASE = 0x80044D00
SOUND_MIXER_DEVMASK = 0xFE


def _mixer_read(device: int) -> int:
    return _MIXER_READ_BASE | device


SOUND_MIXER_READ_DEVMASK = _mixer_read(SOUND_MIXER_DEVMASK)


def mixer_level(value: int) -> int:
    """The left-channel level held in a mixer reading."""
    return value & 0xFF


def _read_int(fd: int, request: int) -> int:
    result = fcntl.ioctl(fd, request, struct.pack("i", 0))
    return struct.unpack("i", result)[0]


def vol_perc(card: str) -> str | None:
    """Master volume of a mixer device in percent."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError:
        warn(f"open '{card}':")
        return None
    level = None
    try:
        try:
            devmask = _read_int(fd, SOUND_MIXER_READ_DEVMASK)
        except OSError:
            warn("ioctl 'SOUND_MIXER_READ_DEVMASK':")
            return None
        for index, name in enumerate(SOUND_DEVICE_NAMES):
            if devmask & (1 << index) and name == "vol":
                try:
                    level = _read_int(fd, _mixer_read(index))
                except OSError:
                    warn(f"ioctl 'MIXER_READ({index})':")
                    return None
    finally:
        os.close(fd)
    if level is None:
        return None
    return str(mixer_level(level))