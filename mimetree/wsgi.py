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
import hashlib
import logging

import bottle

import mimetree.message
from mimetree.errors import ParseError


def _logger(logger):
    return logger if logger is not None else logging.getLogger(__name__)


def run(app, **kwargs):
    bottle.run(app = app, quiet = True, **kwargs)


def summary(part):
    """
    Describe a parsed tree as a JSON-compatible dict.  Leaf content is
    not included, only its size and SHA-256 checksum.
    """
    info = {
        "content_type": part.content_type,
        "disposition": part.disposition,
        "file_name": part.file_name,
        "errors": list(part.errors),
        "headers": { name: values for name, values in part.header.items() },
    }
    if part.is_multipart():
        info["children"] = [ summary(child) for child in part.children() ]
    else:
        info["size"] = len(part.content)
        info["sha256"] = hashlib.sha256(part.content).hexdigest()
    return info


def application(parser = None, logger = None):
    """
    Return a bottle application that parses the MIME document posted
    to /parse and answers with the summary of its tree.
    """
    logger = _logger(logger)
    if parser is None:
        parser = mimetree.message.Parser(logger = logger)

    app = bottle.Bottle()

    @app.post("/parse")
    def _parse():
        try:
            root = parser.parse(bottle.request.body)
        except ParseError as exc:
            logger.warning("rejected document: %s", exc)
            return bottle.HTTPResponse(status = 400,
                                       body = { "error": type(exc).__name__,
                                                "message": str(exc) })
        logger.info("parsed document, %d bytes", bottle.request.content_length)
        return summary(root)

    return app

