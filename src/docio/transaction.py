""" Local proxy for a server-side, multi-statement transaction.
"""


class Transaction:
    """ A :class:`Transaction` pairs the transaction identifier issued by the
        remote side with the remote-operations boundary that can act on it.
        Instances are created by the boundary (see
        :func:`docio.transport.RemoteOperations.open_transaction`), passed
        around by the calling code, and resolved with exactly one call to
        :func:`commit` or :func:`rollback`.

        No local state is kept beyond the identifier: the remote side alone
        decides whether a given commit or rollback is legal. Calling
        :func:`commit` twice issues two remote calls. The identifier may be
        reassigned, in which case subsequent calls act on the new
        transaction.
    """

    def __init__(self, services, transaction_id):

        self.services = services
        self.transaction_id = transaction_id


    def get_transaction_id(self):
        return self.transaction_id


    def set_transaction_id(self, transaction_id):
        self.transaction_id = transaction_id


    def commit(self):
        """ Commit the transaction on the remote side. Any failure reported
            by the remote side propagates unchanged.
        """

        self.services.commit_transaction(self.get_transaction_id())


    def rollback(self):
        """ Roll back the transaction on the remote side. Any failure reported
            by the remote side propagates unchanged.
        """

        self.services.rollback_transaction(self.get_transaction_id())


    def __repr__(self):
        return 'Transaction(%r)' % (self.transaction_id,)


# end of class Transaction


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
