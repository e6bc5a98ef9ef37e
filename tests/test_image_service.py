import numpy as np
import pytest

from ppm_samples import p3_bytes, p6_bytes
from ppmview.models.errors import (
    InvalidPixelValueError,
    PpmError,
    PpmIoError,
    TrailingDataError,
    TruncatedPayloadError,
    UnsupportedFormatError,
)
from ppmview.services.image_service import ImageService, decode, decode_bytes


def test_minimal_binary_image(write_ppm):
    path = write_ppm(b"P6\n1 1\n255\n" + bytes([10, 20, 30]), name="tiny.ppm")
    image = decode(path)
    assert image.filename == "tiny.ppm"
    assert image.magic_number == "P6"
    assert (image.width, image.height, image.max_val) == (1, 1, 255)
    assert image.to_packed_buffer().tolist() == [0x000A141E]


def test_binary_pixel_count_matches_dimensions(write_ppm):
    width, height = 7, 5
    path = write_ppm(p6_bytes(width, height, bytes(range(width * height * 3))))
    image = decode(path)
    assert len(image.pixels) == width * height


def test_ascii_and_binary_decode_to_same_pixels(write_ppm):
    values = [0, 10, 20, 30, 40, 50, 60, 70, 80, 255, 254, 253]
    ascii_image = decode(write_ppm(p3_bytes(2, 2, values), name="a.ppm"))
    binary_image = decode(write_ppm(p6_bytes(2, 2, values), name="b.ppm"))
    assert np.array_equal(ascii_image.pixels, binary_image.pixels)
    assert ascii_image.magic_number == "P3"


def test_comments_in_header_do_not_change_result():
    values = list(range(12))
    plain = decode_bytes(p3_bytes(2, 2, values))
    commented = decode_bytes(p3_bytes(2, 2, values, header_comment="CREATOR: test"))
    assert np.array_equal(plain.pixels, commented.pixels)
    assert (plain.width, plain.height, plain.max_val) == (commented.width, commented.height, commented.max_val)


def test_max_value_does_not_rescale():
    image = decode_bytes(p3_bytes(1, 1, [15, 7, 0], max_val=15))
    assert image.max_val == 15
    assert image.pixels.tolist() == [[15, 7, 0]]


def test_binary_payload_starting_with_hash_byte():
    image = decode_bytes(p6_bytes(1, 1, b"#\n "))
    assert image.pixels.tolist() == [[ord("#"), ord("\n"), ord(" ")]]


def test_truncated_binary_payload():
    with pytest.raises(TruncatedPayloadError):
        decode_bytes(p6_bytes(10, 10, b"\x00" * 299))


@pytest.mark.parametrize("bad", ["256", "-1", "abc"])
def test_out_of_range_ascii_value(bad):
    data = b"P3\n1 1\n255\n1 2 " + bad.encode() + b"\n"
    with pytest.raises(InvalidPixelValueError):
        decode_bytes(data)


def test_ascii_token_count_must_match_exactly():
    with pytest.raises(TruncatedPayloadError):
        decode_bytes(p3_bytes(2, 1, [1, 2, 3, 4, 5]))
    with pytest.raises(TrailingDataError):
        decode_bytes(p3_bytes(1, 1, [1, 2, 3, 4]))


def test_unsupported_format(write_ppm):
    path = write_ppm(b"P2\n1 1\n255\n0\n")
    with pytest.raises(UnsupportedFormatError):
        decode(path)


def test_zero_sized_image_is_accepted():
    image = decode_bytes(b"P6\n0 3\n255\n")
    assert image.pixels.shape == (0, 3)
    assert image.to_packed_buffer().size == 0


def test_missing_file_raises_io_error(tmp_path):
    with pytest.raises(PpmIoError) as info:
        decode(tmp_path / "missing.ppm")
    assert isinstance(info.value, PpmError)
    assert isinstance(info.value.__cause__, FileNotFoundError)


def test_directory_raises_io_error(tmp_path):
    with pytest.raises(PpmIoError):
        decode(tmp_path)


def test_service_load_packed(write_ppm):
    path = write_ppm(p6_bytes(2, 1, [1, 2, 3, 4, 5, 6]))
    result = ImageService(workers=1).load_packed(path)
    assert result.image.width == 2
    assert result.packed.tolist() == [0x010203, 0x040506]
    assert result.seconds >= 0
