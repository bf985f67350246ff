import pytest

from _fluentzpl.emitter import emit
from _fluentzpl.enums import RFIDBank
from _fluentzpl.exceptions import RFIDError
from _fluentzpl.rfid import as_bank, build_rfid_read_tokens, build_rfid_write_tokens


@pytest.mark.parametrize(
    "args, kwargs, expected",
    [
        (("3014257BF7194E4000001A85",), {}, "^RFW,H^FD3014257BF7194E4000001A85^FS"),
        (("ABCD",), {"bank": RFIDBank.USER}, "^RFW,U,0,2^FDABCD^FS"),
        (("ABCDE",), {"bank": RFIDBank.USER}, "^RFW,U,0,3^FDABCDE^FS"),
        (("ABCD",), {"bank": "TID", "offset": 2, "length": 7}, "^RFW,T,2,7^FDABCD^FS"),
        (("ABCD",), {"position": 10}, "^RS,10^RFW,H^FDABCD^FS"),
        (("ABCD",), {"password": "12345678"}, "^RZ12345678,A,U^RFW,H^FDABCD^FS"),
    ],
)
def test_write(args, kwargs, expected):
    assert emit(build_rfid_write_tokens(*args, **kwargs)) == expected


@pytest.mark.parametrize(
    "kwargs, expected",
    [
        ({}, "^RFR,E,0,8^FD^FS"),
        ({"bank": RFIDBank.HOST_BUFFER}, "^RFR,H^FD^FS"),
        ({"bank": RFIDBank.TID, "offset": 2, "length": 4}, "^RFR,T,2,4^FD^FS"),
        ({"bank": "USER", "password": "DEADBEEF"}, "^RZDEADBEEF,A,U^RFR,U,0,8^FD^FS"),
    ],
)
def test_read(kwargs, expected):
    assert emit(build_rfid_read_tokens(**kwargs)) == expected


def test_host_buffer_is_read_only():
    with pytest.raises(RFIDError, match="HostBuffer is read-only"):
        build_rfid_write_tokens("ABCD", bank=RFIDBank.HOST_BUFFER)


@pytest.mark.parametrize("bank", ["RESERVED", None, 3])
def test_unsupported_bank(bank):
    with pytest.raises(RFIDError, match="Unsupported RFID bank"):
        as_bank(bank)


@pytest.mark.parametrize("password", ["1234", "GGGGGGGG", "123456789"])
def test_malformed_password(password):
    with pytest.raises(RFIDError, match="password"):
        build_rfid_read_tokens(password=password)
