import logging
import os

logging.basicConfig(level=os.environ.get('CC_LOG_LEVEL', 'INFO').upper(),
                    format="%(levelname)-8s:%(message)s")
