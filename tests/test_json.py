import pytest

import docio


def test_docio_encode_and_decode():
    encode_and_decode(docio.json.dumps, docio.json.loads)


@pytest.mark.parametrize('malformed', [
    b'{"a": ',
    b'not json',
    b'[1, 2,]',
    b'',
])
def test_decode_error(malformed):
    """ Malformed content raises the DecodeError of whichever library
        docio.json selected, so callers need not know which one it was.
    """

    with pytest.raises(docio.json.DecodeError):
        docio.json.loads(malformed)


def encode_and_decode(dumps, loads):

    input_dictionary = dict()
    input_dictionary['list'] = [1, 2, 3, 'a', 'b', None, 'c', 'z']
    input_dictionary['dict'] = {1: 'one', 'two': 2}
    input_dictionary['none'] = None
    input_dictionary['true'] = True
    input_dictionary['false'] = False

    encoded = dumps(input_dictionary)

    assert isinstance(encoded, bytes)

    # Whitespace in the encoded output varies between the libraries that
    # docio.json may select, so only the decoded result is compared.

    decoded = loads(encoded)
    assert isinstance(decoded, dict)

    # JSON will not use bare integers as dictionary keys, they get translated
    # to strings upon encoding. The decoded result cannot know the original
    # key was an integer.

    assert decoded != input_dictionary

    del decoded['dict']['1']
    decoded['dict'][1] = 'one'
    assert decoded == input_dictionary


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
