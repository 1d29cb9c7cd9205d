from dataclasses import dataclass

import pytest

import eventjson
from eventjson import DecodingError, JsonCodec, TypeRef, marshaller, unmarshaller


@dataclass
class Record:
    id: str


class Attributes:
    specversion = '1.0'
    type = 'com.example.created'


@pytest.mark.parametrize('attributes', [None, Attributes(), {'type': 'x'}])
def test_unmarshaller(attributes):
    unmarshal = unmarshaller(Record)
    payload = '{"id":"123"}'

    assert unmarshal(payload, attributes) == eventjson.decode(payload, Record)
    assert unmarshal(payload, attributes) == Record('123')


def test_unmarshaller_type_ref():
    unmarshal = unmarshaller(TypeRef.list_of(Record))
    assert unmarshal('[{"id":"1"}]', Attributes()) == [Record('1')]


def test_unmarshaller_empty():
    assert unmarshaller(Record)('  ', Attributes()) is None


def test_unmarshaller_invalid():
    with pytest.raises(DecodingError):
        unmarshaller(Record)('{invalid json', Attributes())


@pytest.mark.parametrize('headers', [{}, {'content-type': 'application/json', 'ce-id': '1'}])
def test_marshaller(headers):
    marshal = marshaller()
    value = Record('123')

    assert marshal(value, headers) == eventjson.encode(value)
    assert marshal(value, headers) == '{"id":"123"}'


def test_explicit_codec():
    codec = JsonCodec(order='sorted')
    marshal = marshaller(codec)
    unmarshal = unmarshaller(dict, codec)

    assert marshal({'b': 1, 'a': 2}, {}) == '{"a":2,"b":1}'
    assert unmarshal('{"b": 1}', Attributes()) == {'b': 1}


def test_independent_adapters():
    first = unmarshaller(Record)
    second = unmarshaller(TypeRef.list_of(Record))

    assert first is not second
    assert first('{"id":"1"}', None) == Record('1')
    assert second('[{"id":"1"}]', None) == [Record('1')]
    assert marshaller() is not marshaller()
