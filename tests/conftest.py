import logging

import pytest


@pytest.fixture(scope='session', autouse=True)
def setup_logging():
    logging.root.setLevel('WARNING')
    for name in ['sciencebeam_geometry']:
        logging.getLogger(name).setLevel('DEBUG')
