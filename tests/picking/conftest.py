def pytest_report_header(config):
    import numba
    import numpy as np

    return 'numpy: {0}\nnumba: {1}'.format(np.__version__, numba.__version__)
