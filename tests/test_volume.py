import errno
import struct
from unittest import mock

import pytest

from barstatus import volume


@pytest.fixture
def card(tmp_path):
    path = tmp_path / "mixer"
    path.write_bytes(b"")
    return path


def _int(value):
    return struct.pack("i", value)


def test_missing_device(tmp_path):
    assert volume.vol_perc(tmp_path / "absent") is None


def test_regular_file_is_not_a_mixer(card):
    assert volume.vol_perc(card) is None


def test_reads_left_channel_level(card):
    with mock.patch("barstatus.volume.fcntl.ioctl", side_effect=[_int(1), _int(0x4B4B)]):
        assert volume.vol_perc(card) == str(0x4B)


def test_level_masks_low_byte(card):
    with mock.patch("barstatus.volume.fcntl.ioctl", side_effect=[_int(0xFF), _int(0x1E00 | 40)]):
        assert volume.vol_perc(card) == "40"


def test_no_volume_control(card):
    with mock.patch("barstatus.volume.fcntl.ioctl", side_effect=[_int(0b10)]) as ioctl:
        assert volume.vol_perc(card) is None
    assert ioctl.call_count == 1


def test_level_read_failure(card):
    failure = OSError(errno.EINVAL, "Invalid argument")
    with mock.patch("barstatus.volume.fcntl.ioctl", side_effect=[_int(1), failure]):
        assert volume.vol_perc(card) is None