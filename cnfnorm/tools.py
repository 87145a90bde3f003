from contextlib import contextmanager
from time import time
import logging


logger = logging.getLogger(__name__)


@contextmanager
def timeit(title):
    start = time()
    yield
    end = time()
    logger.debug('%s took %.1fms', title, (end - start) * 1000)
