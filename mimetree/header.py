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
import email.errors
import email.header
import email.headerregistry

from mimetree.errors import MediaTypeSyntaxError


def canonical_name(name):
    return '-'.join(word.capitalize() for word in name.split('-'))


def _unfold(value):
    return ''.join(value.splitlines()).strip()


class Header:
    """
    Ordered mapping of canonical field names to the list of raw values
    found for that field, in order of appearance.
    """

    def __init__(self, fields = ()):
        self._fields = {}
        for name, value in fields:
            self.add(name, value)

    @classmethod
    def from_message(kls, msg):
        """
        Collect the header fields of an email.message.Message parsed
        from bytes.  Folded values are unfolded, and the raw bytes are
        read as UTF-8, undecodable bytes being kept as surrogates.
        """
        def _value(raw):
            raw = raw.encode('ascii', 'surrogateescape')
            return _unfold(raw.decode('utf-8', 'surrogateescape'))
        return kls((name, _value(raw)) for name, raw in msg._headers)

    def add(self, name, value):
        self._fields.setdefault(canonical_name(name), []).append(value)

    def get(self, name, default = ''):
        values = self._fields.get(canonical_name(name))
        if values:
            return values[0]
        return default

    def get_all(self, name):
        return list(self._fields.get(canonical_name(name), ()))

    def decode(self, name, unfold = True, strip = True):
        value = self.get(name, None)
        if value is None:
            return None
        return decode_value(value, unfold = unfold, strip = strip)

    def items(self):
        for name, values in self._fields.items():
            yield name, list(values)

    def __getitem__(self, name):
        return list(self._fields[canonical_name(name)])

    def __contains__(self, name):
        return canonical_name(name) in self._fields

    def __iter__(self):
        return iter(self._fields)

    def __len__(self):
        return len(self._fields)

    def __repr__(self):
        return "<Header %r>" % (self._fields, )


def decode_value(value, unfold = True, strip = True):
    """
    Decode the RFC 2047 encoded-words in a raw header value for display.
    """
    def _decode(s, e):
        if isinstance(s, bytes):
            try:
                s = s.decode(e or 'ascii', 'replace')
            except LookupError:
                s = s.decode('latin-1')
        return s
    if value and unfold:
        value = value.replace('\n', '').replace('\r', '')
    if value:
        value = ''.join(_decode(s, e) for (s, e) in email.header.decode_header(value))
    if value and strip:
        value = ' '.join(value.strip().split())
    return value


_registry = email.headerregistry.HeaderRegistry()

# Encoded-words in quoted parameter values are widespread, and decoded anyway.
_TOLERATED_DEFECTS = ("encoded word inside quoted string",
                      "missing trailing whitespace after encoded-word")

def _recode(value):
    # Bytes that are not UTF-8 (raw latin-1 file names) are read as latin-1.
    try:
        value.encode('utf-8')
    except UnicodeEncodeError:
        value = value.encode('utf-8', 'surrogateescape').decode('latin-1')
    return value


def _parse(name, value):
    value = _recode(_unfold(value))
    try:
        header = _registry(name, value)
    except email.errors.HeaderParseError as exc:
        raise MediaTypeSyntaxError(value, str(exc)) from exc
    defects = [ str(defect) for defect in header.defects
                if str(defect) not in _TOLERATED_DEFECTS ]
    if defects:
        raise MediaTypeSyntaxError(value, defects[0])
    return header


def parse_media_type(value):
    """
    Parse a Content-Type value into its lower-cased "type/subtype" token
    and a dict of parameters.  Parameter names are lower-cased and RFC 2231
    values are decoded.
    """
    header = _parse('content-type', value)
    return header.content_type, dict(header.params)


def parse_disposition(value):
    header = _parse('content-disposition', value)
    return header.content_disposition, dict(header.params)
