import pytest

from urlcodec.services.codec import (
    CharsetClass,
    InvalidByteSequence,
    InvalidEscapeSequence,
    UnmappableCharacter,
    UnrecognizedEncoding,
    decode,
    encode,
    resolve_charset,
    supported_encodings,
    unescape,
)


@pytest.mark.parametrize('label', ['utf-8', 'utf8', 'UTF8', 'UTF-8', ' Utf-8 '])
def test_resolve_utf8_labels(label):
    assert resolve_charset(label) is CharsetClass.UTF8


@pytest.mark.parametrize('label', ['gb2312', 'Gb2312', 'GB2312', 'gbk', 'GBK', 'Gbk', 'gb18030', 'GB18030'])
def test_resolve_chinese_labels(label):
    assert resolve_charset(label) is CharsetClass.CHINESE
    assert resolve_charset(label).codec == 'gb18030'


@pytest.mark.parametrize('label', ['8', '', 'utf', 'gb', 'latin-1', 'big5', 'utf-16', None])
def test_resolve_rejects_unknown_labels(label):
    with pytest.raises(UnrecognizedEncoding):
        resolve_charset(label)


def test_unrecognized_encoding_is_value_error():
    with pytest.raises(ValueError):
        encode('x', 'bogus')


def test_supported_encodings():
    assert set(supported_encodings()) == {'utf-8', 'utf8', 'gb2312', 'gbk', 'gb18030'}


@pytest.mark.parametrize('enc', ['utf-8', 'gbk'])
def test_unreserved_is_identity(enc):
    s = 'AZaz09-_.abcXYZ'
    assert encode(s, enc) == s


def test_encode_space():
    assert encode('a b', 'utf-8') == 'a%20b'


def test_encode_reserved_ascii():
    assert encode('~!*', 'utf-8') == '%7e%21%2a'
    assert encode('a=b&c', 'gbk') == 'a%3db%26c'


def test_encode_chinese_utf8():
    assert encode('你好', 'utf-8') == '%e4%bd%a0%e5%a5%bd'


def test_encode_chinese_gbk():
    assert encode('你好', 'gbk') == '%c4%e3%ba%c3'
    assert encode('你好', 'GB18030') == '%c4%e3%ba%c3'


def test_encode_four_byte_characters():
    assert encode('😀', 'utf-8') == '%f0%9f%98%80'
    assert encode('😀', 'gb18030').count('%') == 4


def test_encode_lone_surrogate_fails():
    with pytest.raises(UnmappableCharacter) as exc_info:
        encode('a\ud800', 'gbk')
    assert exc_info.value.char == '\ud800'
    assert exc_info.value.position == 1

    with pytest.raises(UnmappableCharacter):
        encode('\ud800', 'utf-8')


def test_decode_hex_case_insensitive():
    assert decode('a%2Cb', 'utf-8') == 'a,b'
    assert decode('a%2cb', 'utf-8') == 'a,b'


def test_decode_chinese_gbk():
    assert decode('%C4%E3%BA%C3', 'GB2312') == '你好'
    assert decode('%c4%e3%ba%c3', 'gbk') == '你好'


def test_decode_keeps_literal_characters():
    assert decode('你%20好', 'gbk') == '你 好'
    assert decode('你%20好', 'utf-8') == '你 好'
    assert decode('a+b', 'utf-8') == 'a+b'


@pytest.mark.parametrize('text', ['a%2', '%', '%zz', '% 1', 'ab%g0', '%+f'])
def test_decode_invalid_escape(text):
    with pytest.raises(InvalidEscapeSequence):
        decode(text, 'utf-8')


def test_decode_invalid_escape_position():
    with pytest.raises(InvalidEscapeSequence) as exc_info:
        decode('a%2', 'utf-8')
    assert exc_info.value.position == 1


def test_decode_invalid_bytes_replaced_by_default():
    assert decode('%ff', 'utf-8') == '\ufffd'
    assert decode('a%ff', 'gbk') == 'a\ufffd'


def test_decode_invalid_utf8_bytes_strict():
    with pytest.raises(InvalidByteSequence):
        decode('%ff', 'utf-8', errors='strict')


def test_decode_truncated_gbk_sequence_strict():
    with pytest.raises(InvalidByteSequence):
        decode('%c4', 'gbk', errors='strict')


def test_decode_unknown_errors_mode():
    with pytest.raises(ValueError):
        unescape('abc', CharsetClass.UTF8, errors='ignore')


def test_decode_bogus_encoding():
    with pytest.raises(UnrecognizedEncoding):
        decode('abc', 'bogus')


@pytest.mark.parametrize('enc', ['utf-8', 'gbk'])
def test_round_trip(enc):
    text = '100% 中文，标点！a=b&c 😀'
    assert decode(encode(text, enc), enc) == text
