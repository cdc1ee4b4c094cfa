#
# Copyright (c) 2019 Eric Faurot <eric@faurot.net>
#
# Permission to use, copy, modify, and/or distribute this software for any
# purpose with or without fee is hereby granted, provided that the above
# copyright notice and this permission notice appear in all copies.
#
# THE SOFTWARE IS PROVIDED "AS IS" AND THE AUTHOR DISCLAIMS ALL WARRANTIES
# WITH REGARD TO THIS SOFTWARE INCLUDING ALL IMPLIED WARRANTIES OF
# MERCHANTABILITY AND FITNESS. IN NO EVENT SHALL THE AUTHOR BE LIABLE FOR
# ANY SPECIAL, DIRECT, INDIRECT, OR CONSEQUENTIAL DAMAGES OR ANY DAMAGES
# WHATSOEVER RESULTING FROM LOSS OF USE, DATA OR PROFITS, WHETHER IN AN
# ACTION OF CONTRACT, NEGLIGENCE OR OTHER TORTIOUS ACTION, ARISING OUT OF
# OR IN CONNECTION WITH THE USE OR PERFORMANCE OF THIS SOFTWARE.
#
import collections

import mimetree.header
from mimetree.errors import MediaTypeSyntaxError


Metadata = collections.namedtuple('Metadata', ['content_type',
                                               'params',
                                               'disposition',
                                               'file_name',
                                               'errors'])


def resolve(raw_content_type, raw_disposition = None):
    """
    Compute the metadata of a part from its raw Content-Type and
    Content-Disposition values.

    A malformed Content-Type raises MediaTypeSyntaxError.  A missing or
    malformed Content-Disposition is not an error: the disposition is
    left empty, and in the malformed case the returned errors contain
    "disposition-syntax".  The file name is taken from the disposition
    "filename" parameter, or else from the content type "name" parameter.
    """
    content_type, params = mimetree.header.parse_media_type(raw_content_type or '')

    disposition, dparams, errors = '', {}, ()
    if raw_disposition:
        try:
            disposition, dparams = mimetree.header.parse_disposition(raw_disposition)
        except MediaTypeSyntaxError:
            errors += ('disposition-syntax', )

    file_name = dparams.get('filename') or params.get('name') or ''
    return Metadata(content_type, params, disposition, file_name, errors)


class ErrorMixin:
    errors = ()

    def add_error(self, error):
        self.errors += (error, )


class AbstractPart(ErrorMixin):
    """
    Read-only view of a node in a MIME tree.
    """

    @property
    def parent(self):
        raise NotImplementedError

    @property
    def first_child(self):
        raise NotImplementedError

    @property
    def next_sibling(self):
        raise NotImplementedError

    @property
    def header(self):
        raise NotImplementedError

    @property
    def content_type(self):
        raise NotImplementedError

    @property
    def disposition(self):
        raise NotImplementedError

    @property
    def file_name(self):
        raise NotImplementedError

    @property
    def content(self):
        raise NotImplementedError

    def is_multipart(self):
        return self.content_type.startswith('multipart/')

    def children(self):
        child = self.first_child
        while child is not None:
            yield child
            child = child.next_sibling

    def get_header(self, name):
        return self.header.get(name, None)

    def get_all_headers(self, name):
        return self.header.get_all(name)

    def decoded_header(self, name):
        return self.header.decode(name)

    def walk(self):
        def _iter(part, ancestors):
            yield part, ancestors
            for child in part.children():
                for res in _iter(child, ancestors + (part, )):
                    yield res
        return _iter(self, ())


class Part(AbstractPart):
    """
    In-memory part.  The whole decoded content is held by the node.
    """

    _first_child = None
    _next_sibling = None
    _content_type = ''
    _disposition = ''
    _file_name = ''
    _content = b''

    def __init__(self, parent, header):
        self._parent = parent
        self._header = header

    def __repr__(self):
        return "<Part %s %r>" % (self._content_type, self._file_name)

    @property
    def parent(self):
        return self._parent

    @property
    def first_child(self):
        return self._first_child

    @property
    def next_sibling(self):
        return self._next_sibling

    @property
    def header(self):
        return self._header

    @property
    def content_type(self):
        return self._content_type

    @property
    def disposition(self):
        return self._disposition

    @property
    def file_name(self):
        return self._file_name

    @property
    def content(self):
        return self._content
