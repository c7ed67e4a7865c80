import pytest

from mycpayment.address import (
    Bech32Codec,
    bech32_decode,
    bech32_encode,
    module_address,
    sample_acc_address,
)

SIGNER = b"signerAddr__________________"


def test_codec_round_trip():
    codec = Bech32Codec()
    text = codec.bytes_to_string(SIGNER)
    assert text.startswith("cosmos1")
    assert codec.string_to_bytes(text) == SIGNER


def test_empty_bytes_give_empty_string():
    assert Bech32Codec().bytes_to_string(b"") == ""


def test_decode_minimal_uppercase_string():
    assert bech32_decode("A12UEL5L") == ("a", b"")


def test_gov_module_address():
    codec = Bech32Codec()
    assert codec.bytes_to_string(module_address("gov")) == (
        "cosmos10d07y265gmmuvt4z0w9aw880jnsr700j6zn9kn"
    )


def test_module_addresses_differ_by_name():
    assert module_address("gov") != module_address("payment")
    assert len(module_address("payment")) == 20


def test_encode_decode_round_trip_with_custom_hrp():
    data = bytes(range(32))
    assert bech32_decode(bech32_encode("myc", data)) == ("myc", data)


def test_bad_checksum_rejected():
    text = Bech32Codec().bytes_to_string(SIGNER)
    broken = text[:-1] + ("q" if text[-1] != "q" else "p")
    with pytest.raises(ValueError):
        Bech32Codec().string_to_bytes(broken)


def test_mixed_case_rejected():
    text = Bech32Codec().bytes_to_string(SIGNER)
    with pytest.raises(ValueError):
        bech32_decode(text[:8].upper() + text[8:])


@pytest.mark.parametrize("text", ["", "   ", "invalid"])
def test_invalid_strings_rejected(text):
    with pytest.raises(ValueError):
        Bech32Codec().string_to_bytes(text)


def test_wrong_prefix_rejected():
    other = Bech32Codec("other").bytes_to_string(SIGNER)
    with pytest.raises(ValueError, match="hrp does not match"):
        Bech32Codec().string_to_bytes(other)


def test_encode_requires_hrp():
    with pytest.raises(ValueError):
        bech32_encode("", SIGNER)


def test_sample_address_is_valid_account():
    address = sample_acc_address()
    assert len(Bech32Codec().string_to_bytes(address)) == 20