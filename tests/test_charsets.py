import codecs

import pytest

from reencoder.charsets import DEFAULT_CODECS, TextCodecs
from reencoder.errors import DecodeError, EncodeError, UnsupportedEncodingError


@pytest.mark.parametrize(
    "name, canonical",
    [
        ("UTF-8", "utf-8"),
        ("utf8", "utf-8"),
        ("Windows-1252", "cp1252"),
        ("UTF-16LE", "utf-16-le"),
        (" latin-1 ", "iso8859-1"),
    ],
)
def test_resolve_is_case_insensitive(name, canonical):
    assert DEFAULT_CODECS.resolve(name) == canonical


@pytest.mark.parametrize(
    "name",
    ["not-a-real-encoding", "", "   ", "rot13", "zlib", "base64", "undefined", "utf-8\x00", None],
)
def test_resolve_rejects(name):
    with pytest.raises(UnsupportedEncodingError):
        DEFAULT_CODECS.resolve(name)


def test_bom_table():
    assert DEFAULT_CODECS.bom("utf-8") == codecs.BOM_UTF8
    assert DEFAULT_CODECS.bom("utf-32-be") == codecs.BOM_UTF32_BE
    assert DEFAULT_CODECS.bom("cp1252") == b""


def test_utf32_bom_is_consumed():
    raw = codecs.BOM_UTF32_LE + "x".encode("utf-32-le")
    assert DEFAULT_CODECS.leading_bom(raw, "utf-32") == codecs.BOM_UTF32_LE
    assert DEFAULT_CODECS.decode(raw, "utf-32") == ("x", codecs.BOM_UTF32_LE)


def test_self_stripping_decoders():
    text, bom = DEFAULT_CODECS.decode(codecs.BOM_UTF8 + b"hi", "utf-8-sig")
    assert text == "hi"
    assert bom == codecs.BOM_UTF8

    text, bom = DEFAULT_CODECS.decode(codecs.BOM_UTF16_BE + "hi".encode("utf-16-be"), "utf-16")
    assert text == "hi"
    assert bom == codecs.BOM_UTF16_BE


def test_only_one_bom_is_consumed():
    text, _ = DEFAULT_CODECS.decode(codecs.BOM_UTF8 * 2 + b"a", "utf-8")
    assert text == "\ufeffa"


def test_decode_error_details():
    with pytest.raises(DecodeError) as excinfo:
        DEFAULT_CODECS.decode(b"ab\xc3(", "utf-8")

    details = excinfo.value.details
    assert details["encoding"] == "utf-8"
    assert details["position"] == 2
    assert details["bytes"] == "c3"
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_encode_error_as_dict():
    with pytest.raises(EncodeError) as excinfo:
        DEFAULT_CODECS.encode("a€", "latin-1")

    payload = excinfo.value.as_dict()
    assert payload["error"] == "EncodeError"
    assert payload["details"]["character"] == "€"
    assert payload["details"]["codepoint"] == "U+20AC"
    assert payload["details"]["position"] == 1


def test_codec_capability_can_be_swapped():
    class AsciiOnly(TextCodecs):
        def resolve(self, name):
            canonical = super().resolve(name)
            if canonical != "ascii":
                raise UnsupportedEncodingError(f"Unsupported encoding: {name}", details={"encoding": name})
            return canonical

    from reencoder import transcode

    assert transcode(b"abc", "ascii", "us-ascii", codec=AsciiOnly())[0] == b"abc"
    with pytest.raises(UnsupportedEncodingError):
        transcode(b"abc", "utf-8", "ascii", codec=AsciiOnly())


def test_non_text_codec_in_decode_and_encode_is_unsupported():
    class Unchecked(TextCodecs):
        def resolve(self, name):
            return codecs.lookup(name).name

    with pytest.raises(UnsupportedEncodingError):
        Unchecked().decode(b"YWJj", "base64")
    with pytest.raises(UnsupportedEncodingError):
        Unchecked().encode("abc", "rot13")
