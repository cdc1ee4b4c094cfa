import getopt
import logging
import os
import sys

import mimetree.log
import mimetree.message
from mimetree.errors import ParseError

level = "WARNING"
max_depth = None
default_type = None
extract_dir = None

opts, args = getopt.getopt(sys.argv[1:], "dD:t:x:")
for opt, arg in opts:
    if opt == '-d':
        level = "DEBUG"
    elif opt == '-D':
        max_depth = int(arg)
    elif opt == '-t':
        default_type = arg
    elif opt == '-x':
        extract_dir = arg

if len(args) != 1:
    sys.stderr.write("usage: dump.py [-d] [-D depth] [-t type] [-x dir] file\n")
    sys.exit(2)

mimetree.log.init(level = level)

parser = mimetree.message.Parser(max_depth = max_depth,
                                 default_content_type = default_type)
try:
    with open(args[0], "rb") as fp:
        root = parser.parse(fp)
except ParseError as exc:
    logging.error("%s: %s", args[0], exc)
    sys.exit(1)

for part, ancestors in root.walk():
    line = "%s%s" % ("  " * len(ancestors), part.content_type)
    if part.disposition:
        line += " " + part.disposition
    if part.file_name:
        line += " %r" % (part.file_name, )
    if not part.is_multipart():
        line += " (%d bytes)" % (len(part.content), )
    if part.errors:
        line += " [%s]" % (", ".join(part.errors), )
    print(line)

    if extract_dir and part.file_name and not part.is_multipart():
        path = os.path.join(extract_dir, os.path.basename(part.file_name))
        with open(path, "wb") as fp:
            fp.write(part.content)
