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
import email
import email.errors
import email.policy
import logging

import mimetree.content
import mimetree.header
import mimetree.part
from mimetree.errors import (EnumerationError, HeaderReadError,
                             MissingBoundaryError, NestingError)


# Parser defects that make a document unusable.
_HEADER_DEFECTS = (email.errors.MissingHeaderBodySeparatorDefect,
                   email.errors.FirstHeaderLineIsContinuationDefect,
                   email.errors.InvalidHeaderDefect)

_BOUNDARY_DEFECTS = (email.errors.StartBoundaryNotFoundDefect,
                     email.errors.CloseBoundaryNotFoundDefect)

# Encapsulated messages are written back without refolding.
_FLATTEN_POLICY = email.policy.compat32.clone(max_line_length = None)


def _logger(logger):
    return logger if logger is not None else logging.getLogger(__name__)


def _check(node, kinds, exc_class):
    for defect in node.defects:
        if isinstance(defect, kinds):
            raise exc_class(str(defect) or type(defect).__name__)


class Parser:
    """
    Build a tree of Part objects from a MIME document.

    Framing is done by the email package.  Every part content is then
    decoded in memory.  Any error raises a ParseError subclass, and no
    tree is returned.

    max_depth bounds the nesting of multipart sections.  If
    default_content_type is set, it is used for parts that have no
    Content-Type header, which is otherwise an error.
    """

    max_depth = 64
    default_content_type = None

    def __init__(self, max_depth = None, default_content_type = None, logger = None):
        if max_depth is not None:
            self.max_depth = max_depth
        if default_content_type is not None:
            self.default_content_type = default_content_type
        self.logger = _logger(logger)

    def parse(self, fp):
        try:
            data = fp.read()
        except OSError as exc:
            raise HeaderReadError("cannot read document: %s" % (exc, )) from exc
        return self.parse_bytes(data)

    def parse_bytes(self, data):
        try:
            msg = email.message_from_bytes(data, policy = email.policy.compat32)
        except RecursionError as exc:
            raise NestingError(self.max_depth) from exc
        root = mimetree.part.Part(None, mimetree.header.Header.from_message(msg))
        self._build(root, msg, ())
        return root

    def _build(self, part, node, path):
        _check(node, _HEADER_DEFECTS, HeaderReadError)

        header = part.header
        raw_content_type = header.get('Content-Type') or self.default_content_type
        meta = mimetree.part.resolve(raw_content_type, header.get('Content-Disposition'))
        part._content_type = meta.content_type
        part._disposition = meta.disposition
        part._file_name = meta.file_name
        for error in meta.errors:
            part.add_error(error)

        if meta.content_type.startswith('multipart/'):
            boundary = meta.params.get('boundary')
            if not boundary:
                raise MissingBoundaryError(meta.content_type)
            if len(path) >= self.max_depth:
                raise NestingError(self.max_depth)
            _check(node, _BOUNDARY_DEFECTS, EnumerationError)
            if not node.is_multipart():
                raise EnumerationError("no part found for %s" % (meta.content_type, ))
            self.logger.debug("part %s: %s, boundary %r",
                              _fmt_path(path), meta.content_type, boundary)
            self._build_children(part, node, path)
        else:
            encoding = header.get('Content-Transfer-Encoding')
            part._content = mimetree.content.decode(encoding, _body(node))
            self.logger.debug("part %s: %s, %s, %d bytes",
                              _fmt_path(path), meta.content_type,
                              encoding or "no encoding", len(part._content))

    def _build_children(self, parent, node, path):
        previous = None
        for index, child_node in enumerate(node.get_payload()):
            child = mimetree.part.Part(parent, mimetree.header.Header.from_message(child_node))
            if previous is None:
                parent._first_child = child
            else:
                previous._next_sibling = child
            previous = child
            self._build(child, child_node, path + (index + 1, ))


def _body(node):
    """
    Raw body bytes of a leaf node.  The email package parses message/*
    bodies into sub-messages, which are serialized back.
    """
    payload = node._payload
    if isinstance(payload, list):
        return b''.join(sub.as_bytes(policy = _FLATTEN_POLICY) for sub in payload)
    return (payload or '').encode('ascii', 'surrogateescape')


def _fmt_path(path):
    return ".".join(str(i) for i in path) or "root"


def parse(fp, **kwargs):
    return Parser(**kwargs).parse(fp)


def parse_bytes(data, **kwargs):
    return Parser(**kwargs).parse_bytes(data)
