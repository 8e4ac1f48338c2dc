import io

import pytest
from lxml import etree

import docio
from docio.handle import BytesHandle, DOMHandle, InputStreamHandle
from docio.handle import JSONHandle, SourceHandle, StringHandle
from docio.transport import DocumentNotFound, TransactionError


def test_write_and_read(services):

    services.write_document('/example/flipper.txt', StringHandle('flipper'))

    handle = services.read_document('/example/flipper.txt', StringHandle())
    assert handle.get() == 'flipper'
    assert handle.mimetype == 'text/plain'

    assert services.documents['/example/flipper.txt'].content == b'flipper'


def test_representations_interchange(services):
    """ What one handle writes, any other handle can read, each in its own
        representation.
    """

    source = SourceHandle(io.BytesIO(b'<dolphin name="flipper"/>'))
    services.write_document('/example/flipper.xml', source)

    dom = services.read_document('/example/flipper.xml', DOMHandle())
    assert dom.get().getroot().get('name') == 'flipper'

    raw = services.read_document('/example/flipper.xml', BytesHandle())
    assert etree.fromstring(raw.get()).tag == 'dolphin'
    assert raw.mimetype == 'application/xml'

    services.write_document('/example/flipper.json', JSONHandle({'name': 'flipper'}))
    json = services.read_document('/example/flipper.json', JSONHandle())
    assert json.get() == {'name': 'flipper'}


def test_retry_after_buffering(services):
    """ A one-shot stream can be written twice once it has been buffered.
    """

    handle = InputStreamHandle(io.BytesIO(b'content'))
    handle.to_buffer()

    services.write_document('/first', handle)
    services.write_document('/second', handle)

    assert services.documents['/first'].content == b'content'
    assert services.documents['/second'].content == b'content'


def test_stream_written_once(services):

    handle = InputStreamHandle(io.BytesIO(b'content'))
    services.write_document('/first', handle)

    with pytest.raises(RuntimeError):
        services.write_document('/second', handle)

    assert '/second' not in services.documents


def test_bad_transaction_leaves_content_unread(services):
    """ A write with a finished transaction is refused before the content
        is consumed, so the same stream can be written elsewhere.
    """

    transaction = services.open_transaction()
    transaction.commit()

    stream = io.BytesIO(b'content')
    handle = InputStreamHandle(stream)

    with pytest.raises(TransactionError):
        services.write_document('/late', handle, transaction)

    assert not stream.closed
    assert stream.tell() == 0

    services.write_document('/late', handle)
    assert services.documents['/late'].content == b'content'


def test_write_empty_handle(services):

    with pytest.raises(RuntimeError):
        services.write_document('/empty', StringHandle())

    assert '/empty' not in services.documents


def test_delete(services):

    services.write_document('/example/flipper.xml', BytesHandle(b'<flipper/>'))
    services.delete_document('/example/flipper.xml')

    with pytest.raises(DocumentNotFound):
        services.read_document('/example/flipper.xml', BytesHandle())

    with pytest.raises(DocumentNotFound):
        services.delete_document('/example/flipper.xml')


def test_commit(services):

    transaction = services.open_transaction('load')
    assert isinstance(transaction, docio.Transaction)
    assert transaction.services is services

    services.write_document('/a', StringHandle('a'), transaction)

    # Staged changes are visible within the transaction only.

    assert '/a' not in services.documents
    assert services.read_document('/a', StringHandle(), transaction).get() == 'a'

    with pytest.raises(DocumentNotFound):
        services.read_document('/a', StringHandle())

    transaction.commit()

    assert services.read_document('/a', StringHandle()).get() == 'a'


def test_rollback(services):

    services.write_document('/keep', StringHandle('keep'))

    transaction = services.open_transaction()
    services.write_document('/discard', StringHandle('discard'), transaction)
    services.delete_document('/keep', transaction)

    with pytest.raises(DocumentNotFound):
        services.read_document('/keep', StringHandle(), transaction)

    transaction.rollback()

    assert '/discard' not in services.documents
    assert services.read_document('/keep', StringHandle()).get() == 'keep'


def test_staged_delete_then_commit(services):

    services.write_document('/gone', StringHandle('gone'))

    transaction = services.open_transaction()
    services.delete_document('/gone', transaction)
    transaction.commit()

    assert '/gone' not in services.documents


def test_finished_transaction(services):
    """ The remote side, not the transaction handle, rejects a second
        commit or rollback.
    """

    transaction = services.open_transaction()
    transaction.commit()

    with pytest.raises(TransactionError):
        transaction.commit()

    with pytest.raises(TransactionError):
        transaction.rollback()

    with pytest.raises(TransactionError):
        services.write_document('/late', StringHandle('late'), transaction)


def test_reused_transaction_handle(services):

    first = services.open_transaction()
    second = services.open_transaction()
    assert first.get_transaction_id() != second.get_transaction_id()

    services.write_document('/second', StringHandle('second'), second)

    first.commit()
    assert '/second' not in services.documents

    first.set_transaction_id(second.get_transaction_id())
    first.commit()
    assert services.read_document('/second', StringHandle()).get() == 'second'


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
