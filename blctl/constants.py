import os

__version__ = '1.2.0'

LOCAL_STORAGE_DIRECTORY = os.path.join(os.path.expanduser('~'), '.config', 'blctl')

DEFAULT_API_URL = 'https://api.binarylane.com.au/'
