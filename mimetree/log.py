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
import logging
import logging.handlers
import os
import sys


def init(procname = None,
         level = "INFO",
         logfile = None,
         logfile_maxcount = 10,
         logfile_maxsize = 10 * 1024 * 1024,
         stream = None):
    """
    Configure the root logger for a script or a service.  Messages go
    to the given log file, rotated by size, or else to stream, which
    defaults to stderr so that stdout is left to the program output.
    """
    if procname is None:
        procname = os.path.basename(sys.argv[0])

    formatter = logging.Formatter(fmt = " ".join(["%(asctime)s",
                                                  "%s[%%(process)s]:" % procname,
                                                  "%(levelname)s:",
                                                  "%(name)s:",
                                                  "%(message)s"]),
                                  datefmt = "%Y-%m-%d %H:%M:%S")
    if logfile:
        handler = logging.handlers.RotatingFileHandler(logfile,
                                                       maxBytes = logfile_maxsize,
                                                       backupCount = logfile_maxcount)
    else:
        handler = logging.StreamHandler(stream = sys.stderr if stream is None else stream)

    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger = logging.getLogger()
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
