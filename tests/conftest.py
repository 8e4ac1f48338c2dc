import pytest

import docio


@pytest.fixture
def services():
    return docio.transport.MemoryServices()


@pytest.fixture
def spool(tmp_path, monkeypatch):
    """ Direct any spooled files into a per-test directory.
    """

    monkeypatch.setattr(docio.config, 'spool', str(tmp_path))
    return tmp_path


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
