from statusline import volume


def test_mixer_level_keeps_low_byte():
    for value in range(256):
        assert volume.mixer_level(value) == value


def test_mixer_level_drops_right_channel():
    for left in (0, 1, 50, 100, 255):
        for right in (0, 7, 100):
            assert volume.mixer_level(left | (right << 8)) == left


def test_mixer_level_range():
    for value in range(0, 1 << 16, 97):
        assert 0 <= volume.mixer_level(value) <= 255


def test_vol_perc_missing_device(tmp_path):
    assert volume.vol_perc(str(tmp_path / "mixer")) is None


def test_vol_perc_not_a_mixer(tmp_path):
    path = tmp_path / "mixer"
    path.write_bytes(b"\0" * 8)
    assert volume.vol_perc(str(path)) is None


def test_volume_device_name_order():
    assert volume.SOUND_DEVICE_NAMES.index("vol") == 0
    assert volume.SOUND_MIXER_READ_DEVMASK == 0x80044DFE