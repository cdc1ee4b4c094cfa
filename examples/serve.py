import getopt
import logging
import sys

import mimetree.log
import mimetree.message
import mimetree.wsgi

host = "localhost"
port = 8080
level = "INFO"
logfile = None
max_depth = None

opts, args = getopt.getopt(sys.argv[1:], "dD:f:H:p:")
for opt, arg in opts:
    if opt == '-d':
        level = "DEBUG"
    elif opt == '-D':
        max_depth = int(arg)
    elif opt == '-f':
        logfile = arg
    elif opt == '-H':
        host = arg
    elif opt == '-p':
        port = int(arg)

mimetree.log.init(level = level, logfile = logfile)

logger = logging.getLogger("mimetree.serve")
parser = mimetree.message.Parser(max_depth = max_depth, logger = logger)
app = mimetree.wsgi.application(parser, logger = logger)

logger.info("listening on %s:%d", host, port)
mimetree.wsgi.run(app, host = host, port = port)
