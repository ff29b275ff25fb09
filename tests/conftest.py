import os

from bytepack.conf import UNITTESTS_SETTINGS_FILEPATH

os.environ['BYTEPACK_CONFIG_YAML'] = os.environ.get('BYTEPACK_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)
