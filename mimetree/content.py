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
import base64
import binascii
import quopri

from mimetree.errors import DecodeError


BASE64_ALPHABET = b'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/='

_BASE64_NOISE = bytes(c for c in range(256) if c not in BASE64_ALPHABET)


def _chunks(source, chunk_size = 2 ** 16):
    if isinstance(source, bytes):
        yield source
    else:
        while True:
            chunk = source.read(chunk_size)
            if not chunk:
                return
            yield chunk


def clean_base64(chunks):
    """
    Filter an iterable of byte chunks, dropping every byte that is not
    part of the base64 alphabet (line breaks included).
    """
    for chunk in chunks:
        chunk = chunk.translate(None, _BASE64_NOISE)
        if chunk:
            yield chunk


def _read(source):
    try:
        return b''.join(_chunks(source))
    except OSError as exc:
        raise DecodeError("body", str(exc)) from exc


def decode(encoding, source):
    """
    Read the whole body from source, a binary stream or a bytes object,
    and undo the given Content-Transfer-Encoding.

    Unknown or missing encodings leave the content untouched.  Invalid
    quoted-printable escapes are kept as they are, but invalid base64
    raises a DecodeError.
    """
    encoding = (encoding or '').strip().lower()

    if encoding == 'quoted-printable':
        return quopri.decodestring(_read(source))

    if encoding == 'base64':
        try:
            data = b''.join(clean_base64(_chunks(source)))
        except OSError as exc:
            raise DecodeError(encoding, str(exc)) from exc
        try:
            return base64.b64decode(data, validate = True)
        except binascii.Error as exc:
            raise DecodeError(encoding, str(exc)) from exc

    return _read(source)
