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


class ParseError(Exception):
    """
    Base class for all errors that abort the parsing of a document.
    """


class HeaderReadError(ParseError):
    pass


class MediaTypeSyntaxError(ParseError):

    def __init__(self, value, reason):
        super().__init__("invalid media type %r: %s" % (value, reason))
        self.value = value
        self.reason = reason


class MissingBoundaryError(ParseError):

    def __init__(self, content_type):
        super().__init__("no boundary parameter for %s" % (content_type, ))
        self.content_type = content_type


class DecodeError(ParseError):

    def __init__(self, encoding, reason):
        super().__init__("cannot decode %s content: %s" % (encoding, reason))
        self.encoding = encoding
        self.reason = reason


class EnumerationError(ParseError):
    pass


class NestingError(ParseError):

    def __init__(self, depth):
        super().__init__("multipart nesting deeper than %d levels" % (depth, ))
        self.depth = depth
