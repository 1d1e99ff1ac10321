import pytest

from rttydec.crc import crc


def test_standard_check_value():
    assert crc("123456789") == "29B1"


def test_empty_input_is_initial_value():
    assert crc("") == "FFFF"


@pytest.mark.parametrize("text", ["A", "CALLSIGN,1,15:41:24,52.0,21.0", "$$$"])
def test_result_is_four_uppercase_hex_digits(text):
    result = crc(text)
    assert len(result) == 4
    assert result == result.upper()
    int(result, 16)


def test_str_and_bytes_agree():
    assert crc("HAB,1,2,3") == crc(b"HAB,1,2,3")


def test_appending_checksum_gives_zero_residue():
    message = "ABC,12,34"
    value = int(crc(message), 16)
    assert crc(message + chr(value >> 8) + chr(value & 0xFF)) == "0000"


def test_single_change_alters_checksum():
    assert crc("HAB,1,2,3") != crc("HAB,1,2,4")