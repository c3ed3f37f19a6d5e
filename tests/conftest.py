import logging

# Syslog socket is usually not available where tests run, don't print
# tracebacks for failed log records.
logging.raiseExceptions = False
